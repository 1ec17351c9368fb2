"""Recipe and Notes models."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, LargeBinary, String, Text
from sqlalchemy.orm import relationship

from recipe_app.database import Base
from recipe_app.models.category import recipe_category
from recipe_app.models.enums import Difficulty
from recipe_app.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe model, the aggregate root for notes and ingredients."""

    __tablename__ = "recipe"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)
    prep_time = Column(Integer, nullable=True)  # minutes
    cook_time = Column(Integer, nullable=True)  # minutes
    servings = Column(Integer, nullable=True)
    source = Column(String(255), nullable=True)
    url = Column(String(255), nullable=True)
    directions = Column(Text, nullable=True)
    difficulty = Column(Enum(Difficulty, native_enum=False, length=20), nullable=True)
    image = Column(LargeBinary, nullable=True)

    # Relationships
    notes = relationship(
        "Notes", back_populates="recipe", uselist=False, cascade="all, delete-orphan"
    )
    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Ingredient.id",
    )
    categories = relationship("Category", secondary=recipe_category, back_populates="recipes")

    @property
    def has_image(self) -> bool:
        return bool(self.image)

    def set_notes(self, notes: "Notes | None") -> None:
        """Attach notes, pointing their back-reference at this recipe."""
        if notes is not None:
            notes.recipe = self
        self.notes = notes

    def add_ingredient(self, ingredient: "Ingredient") -> "Recipe":
        ingredient.recipe = self
        if ingredient not in self.ingredients:
            self.ingredients.append(ingredient)
        return self

    def __repr__(self) -> str:
        return f"<Recipe id={self.id} description={self.description!r}>"


class Notes(Base, TimestampMixin):
    """Free-form notes owned by exactly one recipe."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipe.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    recipe_notes = Column(Text, nullable=True)

    # Back-reference used for the mapping only; excluded from equality
    recipe = relationship("Recipe", back_populates="notes")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Notes):
            return NotImplemented
        return self.id == other.id and self.recipe_notes == other.recipe_notes

    def __hash__(self) -> int:
        return hash((self.id, self.recipe_notes))

    def __repr__(self) -> str:
        return f"<Notes id={self.id} recipe_id={self.recipe_id}>"
