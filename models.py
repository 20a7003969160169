import logging
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errors import DataShapeError

log = logging.getLogger("page_controller")

SpecValue = Union[str, int, float]


class Section(BaseModel):
    title: str
    content: str = ""


# 1. Truck image record (ktruckimage.json)
class Truck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    alt: str = ""
    thumbnail_url: str = Field(alias="thumbnailUrl")
    image_url: str = Field(alias="imageUrl")


# 2. Truck description record (ktruckdescription.json), joined to Truck by id
class TruckDescription(BaseModel):
    id: str
    title: str = ""
    year: Optional[SpecValue] = None
    engine: Optional[SpecValue] = None
    transmission: Optional[SpecValue] = None
    capacity: Optional[SpecValue] = None
    mileage: Optional[SpecValue] = None
    price: Optional[SpecValue] = None
    description: str = ""


# 3. Links config (links.json)
class LinksConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    skipt_skool: str = Field(alias="skiptSkool")
    svg_image: str = Field(alias="svgImage")


class SignupResult(BaseModel):
    success: bool
    message: str


def _parse_records(raw, model, resource):
    if not isinstance(raw, list):
        raise DataShapeError(f"{resource} must contain a JSON array, got {type(raw).__name__}")

    records = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            log.warning("Skipping invalid record #%d in %s: %s", index, resource, e.errors()[0]["msg"])
    return records


def parse_trucks(raw) -> List[Truck]:
    return _parse_records(raw, Truck, "ktruckimage.json")


def parse_descriptions(raw) -> List[TruckDescription]:
    return _parse_records(raw, TruckDescription, "ktruckdescription.json")


def find_by_id(records, record_id):
    """Linear search; the gallery holds a handful of records."""
    return next((r for r in records if r.id == record_id), None)
