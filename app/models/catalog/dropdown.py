from tortoise import fields, models

from app.enums.dropdown_field import DropdownField


class DropdownOption(models.Model):
    id = fields.IntField(pk=True)
    field_name = fields.CharEnumField(DropdownField, unique=True)
    options = fields.JSONField(default=list)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "dropdown_options"
