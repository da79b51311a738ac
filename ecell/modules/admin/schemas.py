from pydantic import Field

from ecell.core.schemas import CamelModel


class AdminLoginIn(CamelModel):
    password: str = Field(min_length=1)


class LoginOut(CamelModel):
    success: bool = True
    token: str
    message: str = "Login successful"


class AdminStatusOut(CamelModel):
    success: bool = True
    is_authenticated: bool = True
