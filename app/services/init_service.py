from loguru import logger

from app.core.config import settings
from app.core.security.pass_hash import get_password_hash
from app.enums.user_role import UserRole
from app.models import User, Role

ROLE_DESCRIPTIONS = {
    UserRole.admin: "Manages reference data and listings",
    UserRole.agent: "Manages listings",
}


class InitService:
    @staticmethod
    async def init_roles():
        for role_name, description in ROLE_DESCRIPTIONS.items():
            await Role.get_or_create(name=role_name.value, defaults={"description": description})

    @staticmethod
    async def create_user(email: str, password: str, role: UserRole) -> User:
        """Create a staff account with the given role (no-op if the email exists)"""
        user = await User.get_or_none(email=email)
        if user:
            return user

        user = await User.create(email=email, password_hash=get_password_hash(password))
        role_obj, _ = await Role.get_or_create(name=role.value)
        await user.roles.add(role_obj)
        logger.info(f"{role.value} user created: {email}")
        return user

    @staticmethod
    async def create_default_users():
        accounts = [
            (settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, UserRole.admin),
            (settings.AGENT_EMAIL, settings.AGENT_PASSWORD, UserRole.agent),
        ]
        for email, password, role in accounts:
            if email and password:
                await InitService.create_user(email, password, role)
