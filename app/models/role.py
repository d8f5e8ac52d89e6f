from uuid import uuid4
from tortoise import fields, models


class Role(models.Model):
    """Dealership role: ``admin`` manages the catalog, ``agent`` manages listings"""
    id = fields.UUIDField(pk=True, default=uuid4)
    name = fields.CharField(max_length=50, unique=True)
    description = fields.CharField(max_length=255, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "roles"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
