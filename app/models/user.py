import uuid
import secrets
from typing import Optional
from tortoise import fields, models

from app.core.security.pass_hash import verify_password


class User(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    email = fields.CharField(max_length=255, unique=True)
    password_hash = fields.CharField(max_length=255)
    is_active = fields.BooleanField(default=True)
    salt = fields.CharField(max_length=32, default=lambda: secrets.token_hex(16))
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)
    roles = fields.ManyToManyField("models.Role", related_name="users")

    class Meta:
        table = "users"

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Optional['User']:
        user = await cls.get_or_none(email=email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    async def role_names(self) -> list[str]:
        return [role.name for role in await self.roles.all()]

    async def has_role(self, *role_names: str) -> bool:
        return any(name in role_names for name in await self.role_names())
