import logging

from fastapi import HTTPException, status

from tasksync.db.models.users import User
from tasksync.db.repositories.users import UserRepository
from tasksync.features.authentication.schemas import SignInIn, SignUpIn, TokenOut
from tasksync.features.users.schemas import UserOut
from tasksync.security.password import hash_password, verify_password
from tasksync.security.tokens import (
    InvalidTokenError,
    JWTSettings,
    create_access_token,
    owner_id_from_token,
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service d'authentification : orchestre le repository User + les tokens.
    Ne contient pas d'accès SQL direct et lève des HTTPException propres.
    C'est le seul fournisseur d'identité : le reste de l'API ne reçoit qu'un owner_id vérifié.
    """

    def __init__(self, *, user_repo: UserRepository, jwt_settings: JWTSettings):
        self.user_repo = user_repo
        self.jwt = jwt_settings

    # ---------- Sign up ----------
    def sign_up(self, payload: SignUpIn) -> User:
        if self.user_repo.get_by_username(payload.username):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username already exists",
            )
        if self.user_repo.get_by_email(payload.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already exists",
            )
        user = self.user_repo.create(
            username=payload.username,
            email=payload.email,
            hashed_password=hash_password(payload.password),
        )
        logger.info("user %s registered (id=%s)", user.username, user.id)
        return user

    # ---------- Sign in ----------
    def sign_in(self, payload: SignInIn) -> TokenOut:
        user = self.user_repo.get_by_username(payload.username)
        if not user or not verify_password(payload.password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

        access = create_access_token(user_id=user.id, username=user.username, settings=self.jwt)
        return TokenOut(
            access_token=access,
            token_type="bearer",
            expires_in=int(self.jwt.access_ttl.total_seconds()),
            user=UserOut.model_validate(user),
        )

    # ---------- Current user depuis access token ----------
    def get_current_user(self, *, access_token: str) -> User:
        try:
            user_id = owner_id_from_token(access_token, self.jwt)
        except InvalidTokenError:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

        user = self.user_repo.get(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
        return user
