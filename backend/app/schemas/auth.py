"""Auth Schemas — registration and login payloads.

Invariants:
    - Response bodies never carry the password or its hash
    - Login accepts email or username; email wins when both are present
"""

from app.schemas import CamelModel


class RegisterRequest(CamelModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None
    full_name: str | None = None


class LoginRequest(CamelModel):
    email: str | None = None
    username: str | None = None
    password: str | None = None


class RegisterResponse(CamelModel):
    message: str = "User registered successfully"
    user_id: int
    username: str | None = None
    email: str
    full_name: str


class LoginResponse(CamelModel):
    message: str = "Login successful"
    user_id: int
    username: str | None = None
    email: str
    full_name: str
    token: str
