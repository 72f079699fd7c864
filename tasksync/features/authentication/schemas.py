from pydantic import BaseModel, Field

from tasksync.features.users.schemas import UserOut

# ---------- Inputs ----------

class SignUpIn(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(max_length=100, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6, max_length=128)

class SignInIn(BaseModel):
    username: str
    password: str


# ---------- Outputs ----------

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # secondes (durée de l'access token)
    user: UserOut
