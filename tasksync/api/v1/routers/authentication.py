from fastapi import APIRouter, Depends, status

from tasksync.api.v1.dependencies import (
    get_auth_service,
    get_access_token_from_bearer,
)
from tasksync.features.authentication.services import AuthService
from tasksync.features.authentication.schemas import (
    SignUpIn,
    SignInIn,
    TokenOut,
)
from tasksync.features.users.schemas import UserOut  # pour /me & sign-up

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not Found"}},
)

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/sign-up",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    responses={409: {"description": "Nom d'utilisateur ou email déjà utilisé"}},
)
def sign_up(payload: SignUpIn, svc: AuthService = Depends(get_auth_service)):
    return svc.sign_up(payload)

# -----------------------------
# Sign-in
# -----------------------------
@router.post(
    "/sign-in",
    summary="Se connecter",
    description="Retourne un access token (bearer) valable 24h par défaut.",
    response_model=TokenOut,
    responses={401: {"description": "Identifiants invalides"}},
)
def sign_in(payload: SignInIn, svc: AuthService = Depends(get_auth_service)):
    return svc.sign_in(payload)

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses={
        200: {"description": "Utilisateur courant"},
        401: {"description": "Token invalide ou expiré"},
    },
)
def me(
    access_token: str = Depends(get_access_token_from_bearer),
    svc: AuthService = Depends(get_auth_service),
):
    return svc.get_current_user(access_token=access_token)
