from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class Profile(BaseModel):
    email: str
    username: str
    picture: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileUpdate(BaseModel):
    email: str = ""
    bio: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None
    picture: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfilePictureUpdate(BaseModel):
    email: str = ""
    picture_url: str = ""
    unsplash_image_id: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
