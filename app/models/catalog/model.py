from tortoise import fields, models


class CarModel(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100)
    # RESTRICT backs up the "brand still has models" check at the database level
    brand = fields.ForeignKeyField(
        "models.Brand",
        related_name="car_models",
        on_delete=fields.RESTRICT
    )
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "models"
        unique_together = ("name", "brand")
        ordering = ["name"]
