from tortoise import fields, models

from app.enums.brand_category import BrandCategory


class Brand(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100, unique=True)
    category = fields.CharEnumField(BrandCategory, default=BrandCategory.regular)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "brands"
        ordering = ["name"]
