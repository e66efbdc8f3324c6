"""Authentication use cases"""
from .login import Login
from .logout import Logout
from .authenticate_token import AuthenticateToken
from .create_user import CreateUser
from .dtos import LoginCommandDTO, CreateUserCommandDTO, TokenResponseDTO, UserResponseDTO

__all__ = [
    "Login",
    "Logout",
    "AuthenticateToken",
    "CreateUser",
    "LoginCommandDTO",
    "CreateUserCommandDTO",
    "TokenResponseDTO",
    "UserResponseDTO",
]
