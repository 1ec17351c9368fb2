"""Reference data and sample recipes loaded into an empty database."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from recipe_app.models import Category, Difficulty, Ingredient, Notes, Recipe, UnitOfMeasure
from recipe_app.repositories.recipe import RecipeRepository
from recipe_app.repositories.reference import CategoryRepository, UnitOfMeasureRepository

logger = logging.getLogger(__name__)

CATEGORIES = ["American", "Italian", "Mexican", "Fast Food"]

UNITS_OF_MEASURE = ["Teaspoon", "Tablespoon", "Cup", "Pinch", "Ounce", "Each", "Dash", "Pint"]

GUACAMOLE_DIRECTIONS = """\
1 Cut avocado, remove flesh: Cut the avocados in half. Remove seed. Score the inside of \
the avocado with a blunt knife and scoop out the flesh with a spoon.
2 Mash with a fork: Using a fork, roughly mash the avocado. Don't overdo it! The \
guacamole should be a little chunky.
3 Add salt, lime juice, and the rest: Sprinkle with salt and lime (or lemon) juice. Add \
the chopped onion, cilantro, black pepper, and chiles. Start with half of one chile and \
add to taste.
4 Cover with plastic and chill to store: Place plastic wrap on the surface of the \
guacamole to prevent air reaching it. Refrigerate until ready to serve."""

GUACAMOLE_NOTES = """\
For a very quick guacamole just take a 1/4 cup of salsa and mix it in with your mashed \
avocados.
Feel free to experiment! Add chopped tomato, a handful of pomegranate seeds or some \
sliced radish for crunch."""

TACOS_DIRECTIONS = """\
1 Prepare a gas or charcoal grill for medium-high, direct heat.
2 Make the marinade and coat the chicken: In a large bowl, stir together the chili \
powder, oregano, cumin, sugar, salt, garlic and orange zest. Stir in the orange juice \
and olive oil to make a loose paste. Add the chicken to the bowl and toss to coat all over.
3 Grill the chicken for 3 to 4 minutes per side, or until a thermometer inserted into \
the thickest part of the meat registers 165F. Transfer to a plate and rest for 5 minutes.
4 Warm the tortillas on the grill or over a gas flame for 10 to 20 seconds per side.
5 Assemble the tacos: Slice the chicken into thin strips. Top each tortilla with arugula, \
chicken, avocado, radishes, tomatoes and onion. Drizzle with the thinned sour cream and \
serve with lime wedges."""

TACOS_NOTES = """\
Look for ancho chile powder with the Mexican ingredients at your grocery store, or \
buy it online.
The chicken can marinate for up to a day in the refrigerator."""

# (description, amount, unit)
GUACAMOLE_INGREDIENTS = [
    ("ripe avocados", "2", "Each"),
    ("Kosher salt", "0.5", "Teaspoon"),
    ("fresh lime juice or lemon juice", "2", "Tablespoon"),
    ("minced red onion or thinly sliced green onion", "2", "Tablespoon"),
    ("serrano chiles, stems and seeds removed, minced", "2", "Each"),
    ("Cilantro", "2", "Tablespoon"),
    ("freshly grated black pepper", "2", "Dash"),
    ("ripe tomato, seeds and pulp removed, chopped", "0.5", "Each"),
]

TACOS_INGREDIENTS = [
    ("Ancho Chili Powder", "2", "Tablespoon"),
    ("Dried Oregano", "1", "Teaspoon"),
    ("Dried Cumin", "1", "Teaspoon"),
    ("Sugar", "1", "Teaspoon"),
    ("Salt", "0.5", "Teaspoon"),
    ("Clove of Garlic, Chopped", "1", "Each"),
    ("finely grated orange zest", "1", "Tablespoon"),
    ("fresh-squeezed orange juice", "3", "Tablespoon"),
    ("Olive Oil", "2", "Tablespoon"),
    ("boneless chicken thighs", "4", "Each"),
    ("small corn tortillas", "8", "Each"),
    ("packed baby arugula", "3", "Cup"),
    ("medium ripe avocados, sliced", "2", "Each"),
    ("radishes, thinly sliced", "4", "Each"),
    ("cherry tomatoes, halved", "0.5", "Pint"),
    ("red onion, thinly sliced", "0.25", "Each"),
    ("Roughly chopped cilantro", "4", "Each"),
    ("cup sour cream thinned with 1/4 cup milk", "4", "Tablespoon"),
    ("lime, cut into wedges", "4", "Each"),
]


def load_reference_data(db: Session) -> None:
    """Insert any missing categories and units of measure."""
    categories = CategoryRepository(db)
    for description in CATEGORIES:
        if categories.find_by_description(description) is None:
            categories.save(Category(description=description))

    uoms = UnitOfMeasureRepository(db)
    for description in UNITS_OF_MEASURE:
        if uoms.find_by_description(description) is None:
            uoms.save(UnitOfMeasure(description=description))

    db.commit()


def _build_recipe(
    db: Session,
    ingredients: list[tuple[str, str, str]],
    notes: str,
    category_names: list[str],
    **fields,
) -> Recipe:
    categories = CategoryRepository(db)
    uoms = UnitOfMeasureRepository(db)

    recipe = Recipe(**fields)
    db.add(recipe)
    recipe.set_notes(Notes(recipe_notes=notes))
    for description, amount, unit in ingredients:
        uom = uoms.find_by_description(unit)
        if uom is None:
            raise ValueError(f"Expected unit of measure not found: {unit}")
        ingredient = Ingredient(description=description, amount=Decimal(amount), uom=uom)
        recipe.add_ingredient(ingredient)
    for name in category_names:
        category = categories.find_by_description(name)
        if category is None:
            raise ValueError(f"Expected category not found: {name}")
        recipe.categories.append(category)
    return recipe


def load_sample_recipes(db: Session) -> list[Recipe]:
    """Add the sample recipes. Requires reference data to be loaded."""
    recipes = [
        _build_recipe(
            db,
            GUACAMOLE_INGREDIENTS,
            GUACAMOLE_NOTES,
            ["American", "Mexican"],
            description="Perfect Guacamole",
            prep_time=10,
            cook_time=0,
            servings=4,
            source="Simply Recipes",
            url="https://www.simplyrecipes.com/recipes/perfect_guacamole/",
            difficulty=Difficulty.EASY,
            directions=GUACAMOLE_DIRECTIONS,
        ),
        _build_recipe(
            db,
            TACOS_INGREDIENTS,
            TACOS_NOTES,
            ["American", "Mexican"],
            description="Spicy Grilled Chicken Tacos",
            prep_time=20,
            cook_time=15,
            servings=6,
            source="Simply Recipes",
            url="https://www.simplyrecipes.com/recipes/spicy_grilled_chicken_tacos/",
            difficulty=Difficulty.MEDIUM,
            directions=TACOS_DIRECTIONS,
        ),
    ]

    repository = RecipeRepository(db)
    for recipe in recipes:
        repository.save(recipe)
    db.commit()
    return recipes


def bootstrap(db: Session) -> None:
    """Load reference data, then sample recipes if there are no recipes yet."""
    load_reference_data(db)

    if RecipeRepository(db).count() > 0:
        logger.info("Recipes already present, skipping sample data")
        return

    recipes = load_sample_recipes(db)
    logger.info(f"Loaded {len(recipes)} sample recipes")
