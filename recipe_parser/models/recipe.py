from typing import Iterable, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from ..config.settings import settings


class Ingredient(BaseModel):
    """A single ingredient line split into quantity, unit, name and notes"""
    ingredient_name: str = Field("", description="Ingredient name, empty if the line could not be parsed")
    quantity: Optional[str] = Field(None, description="Quantity exactly as written, e.g. '1/2' or '1 1/2'")
    unit: Optional[str] = Field(None, description="Unit from the cooking unit vocabulary, e.g. 'cups'")
    notes: Optional[str] = Field(None, description="Text after the first comma, e.g. 'finely chopped'")

    model_config = {
        "json_schema_extra": {
            "example": {
                "ingredient_name": "chicken breast",
                "quantity": "2",
                "unit": "lbs",
                "notes": "boneless skinless"
            }
        }
    }


class Step(BaseModel):
    """A numbered recipe instruction"""
    step_number: int = Field(..., ge=1, description="1-based position of the step")
    instruction: str = Field(..., min_length=1, description="Instruction text")


class NormalizedRecipe(BaseModel):
    """
    Recipe record produced by the extraction engine.

    A recipe is only valid with a title, at least one ingredient and at least
    one step; validation rejects anything sparser.
    """
    title: str = Field(..., min_length=1, description="Recipe title")
    description: Optional[str] = Field(None, description="Short recipe description")
    source_url: str = Field(..., description="Page the recipe was extracted from")
    image_url: Optional[str] = Field(None, description="Main recipe image")
    # No sign constraint: reconciled times are reported as computed
    prep_time_minutes: Optional[int] = Field(None, description="Preparation time in minutes")
    cook_time_minutes: Optional[int] = Field(None, description="Cooking time in minutes")
    servings: Optional[int] = Field(None, gt=0, description="Number of servings")
    ingredients: List[Ingredient] = Field(..., min_length=1, description="Ingredients in page order")
    steps: List[Step] = Field(..., min_length=1, description="Steps in page order")
    notes: Optional[str] = Field(None, description="Free-text notes")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @model_validator(mode="after")
    def steps_are_sequential(self) -> "NormalizedRecipe":
        numbers = [step.step_number for step in self.steps]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"step numbers must run 1..{len(numbers)} without gaps, got {numbers}")
        return self


class ParseOptions(BaseModel):
    """Options for fetching a recipe page"""
    timeout: int = Field(default_factory=lambda: settings.fetch_timeout_ms, gt=0,
                         description="Fetch timeout in milliseconds")
    user_agent: str = Field(default_factory=lambda: settings.user_agent, alias="userAgent",
                            description="User-Agent header sent with the request")

    model_config = {
        "populate_by_name": True
    }


def number_steps(instructions: Iterable[str]) -> List[Step]:
    """Turn instruction strings into sequentially numbered steps, skipping blanks."""
    texts = [text.strip() for text in instructions if text and text.strip()]
    return [Step(step_number=index, instruction=text) for index, text in enumerate(texts, start=1)]
