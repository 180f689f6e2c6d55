import logging
from sqlalchemy.orm import Session
from foodtoday.database import SessionLocal, init_db
from foodtoday.models.recipe import Recipe
from foodtoday.models.user import User
from foodtoday.services.auth import get_password_hash

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@cookease.com"
DEMO_PASSWORD = "password123"


def _ingredients(*items):
    return [{"name": name, "amount": amount, "inPantry": in_pantry} for name, amount, in_pantry in items]


RECIPES = [
    {
        "title": "Aloo Paratha",
        "description": "Traditional Indian flatbread stuffed with spiced potato filling, served with yogurt and pickle.",
        "image": "/images/dishes/aloo-paratha.jpg",
        "cook_time": 45, "servings": 4, "difficulty": "medium", "cuisine": "indian", "meal_type": "breakfast",
        "calories": 350, "protein": 8, "carbs": 50, "fat": 12, "fiber": 4, "rating": 4.5,
        "ingredients": _ingredients(
            ("Whole wheat flour", "2 cups", True),
            ("Potatoes", "3 large", True),
            ("Ghee", "3 tbsp", False),
            ("Cumin seeds", "1 tsp", True),
            ("Green chilies", "2", True),
        ),
        "instructions": [
            "Boil potatoes until tender, peel and mash",
            "Mix mashed potatoes with spices and chilies",
            "Make dough with flour, water, and salt",
            "Roll small portions, stuff with potato filling",
            "Cook on hot tawa with ghee until golden brown",
        ],
        "tags": ["vegetarian", "indian", "breakfast", "comfort-food"],
    },
    {
        "title": "Chicken Biryani",
        "description": "Fragrant basmati rice layered with spiced chicken, cooked in aromatic spices and saffron.",
        "image": "/images/dishes/chicken-biryani.jpg",
        "cook_time": 90, "servings": 6, "difficulty": "hard", "cuisine": "indian", "meal_type": "dinner",
        "calories": 580, "protein": 35, "carbs": 65, "fat": 18, "fiber": 3, "rating": 4.8,
        "ingredients": _ingredients(
            ("Basmati rice", "2 cups", True),
            ("Chicken", "1 kg", False),
            ("Yogurt", "1 cup", False),
            ("Saffron", "pinch", False),
            ("Biryani masala", "2 tbsp", True),
        ),
        "instructions": [
            "Marinate chicken in yogurt and spices for 2 hours",
            "Cook rice until 70% done",
            "Layer rice and chicken alternately",
            "Cover and cook on low heat for 45 minutes",
        ],
        "tags": ["non-vegetarian", "indian", "festive", "aromatic"],
    },
    {
        "title": "Vegetable Lasagna",
        "description": "Layers of pasta, ricotta, spinach and roasted vegetables baked in a rich tomato sauce.",
        "image": "/images/dishes/vegetable-lasagna.jpg",
        "cook_time": 75, "servings": 8, "difficulty": "hard", "cuisine": "italian", "meal_type": "dinner",
        "calories": 410, "protein": 18, "carbs": 48, "fat": 16, "fiber": 6, "rating": 4.6,
        "ingredients": _ingredients(
            ("Lasagna sheets", "12", True),
            ("Ricotta", "500g", False),
            ("Spinach", "200g", False),
            ("Zucchini", "2", False),
            ("Tomato sauce", "3 cups", True),
        ),
        "instructions": [
            "Roast the vegetables until tender",
            "Mix ricotta with spinach",
            "Layer sauce, pasta, ricotta and vegetables",
            "Bake covered for 40 minutes, then uncovered for 15",
        ],
        "tags": ["vegetarian", "italian", "baked", "family-meal"],
    },
    {
        "title": "Margherita Pizza",
        "description": "Traditional Neapolitan pizza with fresh tomatoes, mozzarella, basil, and olive oil.",
        "image": "/images/dishes/margherita-pizza.jpg",
        "cook_time": 25, "servings": 2, "difficulty": "medium", "cuisine": "italian", "meal_type": "dinner",
        "calories": 320, "protein": 14, "carbs": 42, "fat": 11, "fiber": 3, "rating": 4.4,
        "ingredients": _ingredients(
            ("Pizza dough", "1 ball", False),
            ("Tomato sauce", "1/2 cup", True),
            ("Fresh mozzarella", "200g", False),
            ("Fresh basil", "10 leaves", False),
            ("Olive oil", "2 tbsp", True),
        ),
        "instructions": [
            "Preheat oven to 250°C (480°F)",
            "Roll out pizza dough on floured surface",
            "Spread tomato sauce and add mozzarella",
            "Bake for 10-12 minutes until crust is golden",
        ],
        "tags": ["italian", "vegetarian", "classic", "quick"],
    },
    {
        "title": "Chicken Tacos",
        "description": "Soft corn tortillas filled with seasoned chicken, fresh salsa, and creamy avocado.",
        "image": "/images/dishes/chicken-tacos.jpg",
        "cook_time": 25, "servings": 4, "difficulty": "easy", "cuisine": "mexican", "meal_type": "lunch",
        "calories": 285, "protein": 22, "carbs": 25, "fat": 12, "fiber": 4, "rating": 4.7,
        "ingredients": _ingredients(
            ("Chicken breast", "500g", False),
            ("Corn tortillas", "8", False),
            ("Avocado", "2", False),
            ("Lime", "1", True),
        ),
        "instructions": [
            "Season and grill the chicken",
            "Warm the tortillas",
            "Slice chicken and assemble with salsa and avocado",
        ],
        "tags": ["mexican", "quick", "healthy", "protein-rich"],
    },
    {
        "title": "Greek Salad",
        "description": "Crisp vegetables, olives and feta tossed in a lemony olive oil dressing.",
        "image": "/images/dishes/greek-salad.jpg",
        "cook_time": 10, "servings": 4, "difficulty": "easy", "cuisine": "mediterranean", "meal_type": "lunch",
        "calories": 180, "protein": 6, "carbs": 10, "fat": 14, "fiber": 3, "rating": 4.3,
        "ingredients": _ingredients(
            ("Cucumber", "1", False),
            ("Tomatoes", "3", True),
            ("Feta cheese", "150g", False),
            ("Kalamata olives", "1/2 cup", False),
            ("Olive oil", "3 tbsp", True),
        ),
        "instructions": [
            "Chop the vegetables",
            "Add olives and crumbled feta",
            "Dress with olive oil and lemon juice",
        ],
        "tags": ["mediterranean", "healthy", "quick", "vegetarian", "no-cook"],
    },
    {
        "title": "Peanut Noodle Bowl",
        "description": "Chewy noodles in a creamy peanut and soy dressing with crunchy vegetables.",
        "image": "/images/dishes/peanut-noodles.jpg",
        "cook_time": 15, "servings": 2, "difficulty": "easy", "cuisine": "asian", "meal_type": "lunch",
        "calories": 460, "protein": 15, "carbs": 55, "fat": 20, "fiber": 5, "rating": 4.9,
        "ingredients": _ingredients(
            ("Noodles", "200g", True),
            ("Peanut butter", "3 tbsp", True),
            ("Soy sauce", "2 tbsp", True),
            ("Carrots", "2", True),
        ),
        "instructions": [
            "Cook noodles and rinse under cold water",
            "Whisk peanut butter with soy sauce and water",
            "Toss noodles with dressing and vegetables",
        ],
        "tags": ["vegetarian", "asian", "quick"],
    },
    {
        "title": "Pasta Carbonara",
        "description": "Classic Roman pasta dish with eggs, cheese, pancetta, and black pepper creating a creamy sauce.",
        "image": "/images/dishes/pasta-carbonara.jpg",
        "cook_time": 20, "servings": 4, "difficulty": "medium", "cuisine": "italian", "meal_type": "dinner",
        "calories": 390, "protein": 18, "carbs": 45, "fat": 15, "fiber": 3, "rating": 4.6,
        "ingredients": _ingredients(
            ("Spaghetti", "400g", True),
            ("Pancetta or bacon", "150g", False),
            ("Eggs", "3 large", True),
            ("Parmesan cheese", "100g", False),
        ),
        "instructions": [
            "Cook spaghetti until al dente",
            "Fry pancetta until crispy",
            "Mix hot pasta with egg and cheese off the heat",
        ],
        "tags": ["italian", "quick", "creamy", "classic"],
    },
    {
        "title": "Fluffy Pancakes",
        "description": "Light and fluffy American-style pancakes served with maple syrup.",
        "image": "/images/dishes/pancakes.jpg",
        "cook_time": 20, "servings": 4, "difficulty": "easy", "cuisine": "american", "meal_type": "breakfast",
        "calories": 280, "protein": 8, "carbs": 40, "fat": 9, "fiber": 1, "rating": 4.2,
        "ingredients": _ingredients(
            ("All-purpose flour", "1 1/2 cups", True),
            ("Milk", "1 1/4 cups", True),
            ("Egg", "1", True),
            ("Butter", "3 tbsp", True),
        ),
        "instructions": [
            "Whisk dry ingredients together",
            "Add milk, egg and melted butter",
            "Cook on a hot griddle until bubbles form, then flip",
        ],
        "tags": ["breakfast", "american", "quick", "family-friendly"],
    },
    {
        "title": "Hummus Bowl",
        "description": "Creamy homemade hummus with fresh vegetables and pita bread.",
        "image": "/images/dishes/hummus-bowl.jpg",
        "cook_time": 15, "servings": 4, "difficulty": "easy", "cuisine": "mediterranean", "meal_type": "lunch",
        "calories": 180, "protein": 8, "carbs": 20, "fat": 8, "fiber": 6, "rating": 4.1,
        "ingredients": _ingredients(
            ("Chickpeas", "1 can", True),
            ("Tahini", "2 tbsp", False),
            ("Lemon juice", "2 tbsp", False),
            ("Pita bread", "4 pieces", False),
        ),
        "instructions": [
            "Blend chickpeas, tahini, lemon juice and garlic",
            "Add water gradually until smooth",
            "Serve with chopped vegetables and pita",
        ],
        "tags": ["vegetarian", "healthy", "mediterranean", "protein-rich"],
    },
]


def seed_database(db: Session) -> dict:
    """Create the demo user and starter recipes. Safe to run repeatedly."""
    demo = db.query(User).filter(User.email == DEMO_EMAIL).first()
    if not demo:
        demo = User(
            email=DEMO_EMAIL,
            name="Demo Chef",
            hashed_password=get_password_hash(DEMO_PASSWORD),
            dietary_restrictions=["vegetarian"],
            allergies=["nuts"],
            cuisine_preferences=["italian", "indian", "mexican"],
            meal_types=[],
            skill_level="intermediate",
        )
        db.add(demo)
        db.commit()
        db.refresh(demo)
        logger.info(f"[SEED] Created demo user: {demo.email}")
    else:
        logger.info(f"[SEED] Demo user already exists: {demo.email}")

    existing = {title for (title,) in db.query(Recipe.title).all()}
    created = 0
    for data in RECIPES:
        if data["title"] in existing:
            continue
        db.add(Recipe(author_id=demo.id, **data))
        created += 1
    db.commit()

    logger.info(f"[SEED] Created {created} recipes")
    return {"user": demo.email, "recipes_created": created}


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        result = seed_database(db)
    finally:
        db.close()
    print(f"Seeded database: {result}")


if __name__ == "__main__":
    main()
