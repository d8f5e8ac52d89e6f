"""Request builders shared by the API tests"""


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def car_form(brand_id: int, model_id: int, **overrides) -> dict:
    form = {
        "stock_code": "stk-001",
        "plate_number": "ka01ab1234",
        "brand": str(brand_id),
        "model": str(model_id),
        "variant": "2.5 Hybrid",
        "year_of_manufacture": "2021",
        "registration_year": "2021",
        "fuel_type": "Hybrid",
        "transmission": "Automatic",
        "km": "25000",
        "price": "3450000",
        "ownership": "1st Owner",
        "registration_state": "KA",
        "rto": "KA01",
    }
    form.update({key: str(value) for key, value in overrides.items()})
    return form


def image_files(count: int, prefix: str = "photo", content_type: str = "image/jpeg") -> list:
    return [
        ("images", (f"{prefix}{i}.jpg", b"\xff\xd8\xff" + bytes([i]), content_type))
        for i in range(count)
    ]
