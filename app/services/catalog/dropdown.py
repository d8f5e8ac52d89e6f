from typing import Iterable, List
from loguru import logger
from tortoise.exceptions import IntegrityError

from app.core.exceptions import InvalidArgumentError, NotFoundError, ValidationError
from app.enums.dropdown_field import DropdownField
from app.models.catalog.dropdown import DropdownOption


def _parse_field(field_name: str) -> DropdownField:
    try:
        return DropdownField(field_name)
    except ValueError:
        allowed = ", ".join(f.value for f in DropdownField)
        raise InvalidArgumentError(f"Unknown dropdown field '{field_name}'. Expected one of: {allowed}")


def _clean_options(options: Iterable[str]) -> List[str]:
    cleaned = [option.strip() for option in options]
    if any(not option for option in cleaned):
        raise ValidationError("Dropdown options cannot be blank")
    return cleaned


async def get_all_dropdowns() -> List[DropdownOption]:
    return await DropdownOption.all().order_by("field_name")


async def get_dropdown(field_name: str) -> DropdownOption:
    field = _parse_field(field_name)
    dropdown = await DropdownOption.get_or_none(field_name=field)
    if not dropdown:
        raise NotFoundError("Dropdown options not found")
    return dropdown


async def update_dropdown(field_name: str, options: Iterable[str]) -> DropdownOption:
    """
    Replace the option list of a dropdown, creating the entry on first use.

    Options are stored as given (trimmed), the previous list is discarded.
    Car fields are not checked against these vocabularies.
    """
    field = _parse_field(field_name)
    cleaned = _clean_options(options)

    dropdown = await DropdownOption.get_or_none(field_name=field)
    if dropdown is None:
        try:
            dropdown = await DropdownOption.create(field_name=field, options=cleaned)
            logger.info(f"Dropdown created: {field.value} ({len(cleaned)} options)")
            return dropdown
        except IntegrityError:
            # created concurrently, fall through to replace
            dropdown = await DropdownOption.get(field_name=field)

    dropdown.options = cleaned
    await dropdown.save()
    logger.info(f"Dropdown replaced: {field.value} ({len(cleaned)} options)")
    return dropdown
