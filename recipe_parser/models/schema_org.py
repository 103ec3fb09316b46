"""
Schema.org Recipe (JSON-LD) document models.

Publishers emit several shapes for the same field (an image can be a URL, an
ImageObject or a list of either; instructions can be one string, a list of
strings, HowToStep objects or HowToSection groups). Each ambiguous field is a
closed, tagged union: the shape functions below pick the tag, and values whose
shape is outside the set are dropped to None before validation.
"""

import math
from typing import Annotated, Any, List, Optional, Union
from pydantic import BaseModel, Discriminator, Field, Tag, field_validator


def _type_names(value: Any) -> List[str]:
    """Return the @type of a raw JSON-LD object as a list of names."""
    if isinstance(value, dict):
        value = value.get("@type")
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    return []


def is_recipe_object(data: Any) -> bool:
    """True for a JSON-LD object whose @type is "Recipe" or a list containing it."""
    return isinstance(data, dict) and "Recipe" in _type_names(data)


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class ImageObject(BaseModel):
    """schema.org ImageObject"""
    type: Optional[Union[str, List[str]]] = Field(None, alias="@type")
    url: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator("url", mode="before")
    @classmethod
    def _url_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class Person(BaseModel):
    """schema.org Person / Organization reduced to its name"""
    type: Optional[Union[str, List[str]]] = Field(None, alias="@type")
    name: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


class HowToStep(BaseModel):
    """schema.org HowToStep"""
    type: Optional[Union[str, List[str]]] = Field(None, alias="@type")
    text: Optional[str] = None
    name: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator("text", "name", mode="before")
    @classmethod
    def _plain_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)


# --- shape tags ---

def _image_item_shape(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return "url"
    if isinstance(value, (dict, ImageObject)):
        return "object"
    return None


def _image_shape(value: Any) -> Optional[str]:
    if isinstance(value, list):
        return "list"
    return _image_item_shape(value)


def _yield_item_shape(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "text"
    return None


def _yield_shape(value: Any) -> Optional[str]:
    if isinstance(value, list):
        return "list"
    return _yield_item_shape(value)


def _author_item_shape(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return "name"
    if isinstance(value, (dict, Person)):
        return "person"
    return None


def _author_shape(value: Any) -> Optional[str]:
    if isinstance(value, list):
        return "list"
    return _author_item_shape(value)


def _step_shape(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return "text"
    if isinstance(value, (dict, HowToStep)):
        return "step"
    return None


def _instruction_item_shape(value: Any) -> Optional[str]:
    if isinstance(value, HowToSection):
        return "section"
    if isinstance(value, dict) and ("HowToSection" in _type_names(value) or "itemListElement" in value):
        return "section"
    return _step_shape(value)


def _instructions_shape(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return "text"
    if isinstance(value, list):
        return "list"
    return None


def _keep_shapes(value: Any, shape, item_shape) -> Any:
    """Drop a value (or list members) whose shape is not part of the union."""
    if isinstance(value, list):
        return [item for item in value if item_shape(item) is not None]
    return value if shape(value) is not None else None


ImageItem = Annotated[
    Union[Annotated[str, Tag("url")], Annotated[ImageObject, Tag("object")]],
    Discriminator(_image_item_shape),
]
ImageField = Annotated[
    Union[
        Annotated[str, Tag("url")],
        Annotated[ImageObject, Tag("object")],
        Annotated[List[ImageItem], Tag("list")],
    ],
    Discriminator(_image_shape),
]

YieldItem = Annotated[
    Union[Annotated[Union[int, float], Tag("number")], Annotated[str, Tag("text")]],
    Discriminator(_yield_item_shape),
]
YieldField = Annotated[
    Union[
        Annotated[Union[int, float], Tag("number")],
        Annotated[str, Tag("text")],
        Annotated[List[YieldItem], Tag("list")],
    ],
    Discriminator(_yield_shape),
]

AuthorItem = Annotated[
    Union[Annotated[str, Tag("name")], Annotated[Person, Tag("person")]],
    Discriminator(_author_item_shape),
]
AuthorField = Annotated[
    Union[
        Annotated[str, Tag("name")],
        Annotated[Person, Tag("person")],
        Annotated[List[AuthorItem], Tag("list")],
    ],
    Discriminator(_author_shape),
]

StepItem = Annotated[
    Union[Annotated[str, Tag("text")], Annotated[HowToStep, Tag("step")]],
    Discriminator(_step_shape),
]


class HowToSection(BaseModel):
    """schema.org HowToSection: a named group of steps"""
    type: Optional[Union[str, List[str]]] = Field(None, alias="@type")
    name: Optional[str] = None
    item_list_element: List[StepItem] = Field(default_factory=list, alias="itemListElement")

    model_config = {"populate_by_name": True}

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)

    @field_validator("item_list_element", mode="before")
    @classmethod
    def _known_steps(cls, value: Any) -> List[Any]:
        if isinstance(value, (str, dict)):
            value = [value]
        if not isinstance(value, list):
            return []
        return [item for item in value if _step_shape(item) is not None]


InstructionItem = Annotated[
    Union[
        Annotated[str, Tag("text")],
        Annotated[HowToStep, Tag("step")],
        Annotated[HowToSection, Tag("section")],
    ],
    Discriminator(_instruction_item_shape),
]
InstructionsField = Annotated[
    Union[Annotated[str, Tag("text")], Annotated[List[InstructionItem], Tag("list")]],
    Discriminator(_instructions_shape),
]


class StructuredRecipeDocument(BaseModel):
    """The schema.org Recipe fields the engine reads from a JSON-LD block"""
    type: Union[str, List[str]] = Field("Recipe", alias="@type")
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[ImageField] = None
    author: Optional[AuthorField] = None
    prep_time: Optional[str] = Field(None, alias="prepTime")
    cook_time: Optional[str] = Field(None, alias="cookTime")
    total_time: Optional[str] = Field(None, alias="totalTime")
    recipe_yield: Optional[YieldField] = Field(None, alias="recipeYield")
    recipe_ingredient: Optional[List[str]] = Field(None, alias="recipeIngredient")
    recipe_instructions: Optional[InstructionsField] = Field(None, alias="recipeInstructions")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("name", "description", "prep_time", "cook_time", "total_time", mode="before")
    @classmethod
    def _plain_text(cls, value: Any) -> Optional[str]:
        return _text_or_none(value)

    @field_validator("image", mode="before")
    @classmethod
    def _known_image(cls, value: Any) -> Any:
        return _keep_shapes(value, _image_shape, _image_item_shape)

    @field_validator("author", mode="before")
    @classmethod
    def _known_author(cls, value: Any) -> Any:
        return _keep_shapes(value, _author_shape, _author_item_shape)

    @field_validator("recipe_yield", mode="before")
    @classmethod
    def _known_yield(cls, value: Any) -> Any:
        return _keep_shapes(value, _yield_shape, _yield_item_shape)

    @field_validator("recipe_ingredient", mode="before")
    @classmethod
    def _ingredient_lines(cls, value: Any) -> Optional[List[str]]:
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str)]
        return None

    @field_validator("recipe_instructions", mode="before")
    @classmethod
    def _known_instructions(cls, value: Any) -> Any:
        # A lone HowToStep / HowToSection object is treated as a one-item list
        if isinstance(value, dict):
            value = [value]
        return _keep_shapes(value, _instructions_shape, _instruction_item_shape)
