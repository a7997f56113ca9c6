from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    full_name: str
    email: EmailStr
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
