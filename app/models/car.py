from tortoise import fields, models


class Car(models.Model):
    id = fields.IntField(pk=True)
    stock_code = fields.CharField(max_length=50, unique=True)
    plate_number = fields.CharField(max_length=20, unique=True)

    brand = fields.ForeignKeyField("models.Brand", related_name="cars", on_delete=fields.RESTRICT)
    model = fields.ForeignKeyField("models.CarModel", related_name="cars", on_delete=fields.RESTRICT)
    variant = fields.CharField(max_length=100)

    year_of_manufacture = fields.SmallIntField()
    registration_year = fields.SmallIntField()
    fuel_type = fields.CharField(max_length=50)
    transmission = fields.CharField(max_length=50)
    km = fields.IntField()
    price = fields.DecimalField(max_digits=12, decimal_places=2)
    ownership = fields.CharField(max_length=50)
    registration_state = fields.CharField(max_length=50)
    rto = fields.CharField(max_length=20)
    insurance_valid_till = fields.DateField(null=True)

    # Ordered list of image URLs, owned by the car
    images = fields.JSONField(default=list)

    created_by = fields.ForeignKeyField("models.User", related_name="cars")
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "cars"

    def __str__(self):
        return f"Car {self.stock_code} ({self.plate_number})"
