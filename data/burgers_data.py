"""
Built-in burger catalogue.

These recipes ship with the app and are never modified at runtime.
"""

from typing import List

from models import Recipe, NutritionData


BUILTIN_IMAGE_KEYS = frozenset({
    "classic", "mushroomSwiss", "veggie", "spicy", "bbq", "lamb", "portobello",
    "hawaiian", "doubleBacon", "turkey", "blueCheese", "breakfast", "kimchi",
    "salmonBurger",
})


def _recipe(**kwargs) -> Recipe:
    calories = kwargs.get("calories", 0)
    nutrition = kwargs.pop("macros", None)
    if nutrition:
        protein, carbs, fat = nutrition
        kwargs["nutrition"] = NutritionData(calories=calories, protein=protein, carbs=carbs, fat=fat)
    return Recipe(servings=4, **kwargs)


_BURGERS = [
    _recipe(
        id="1", name="Classic Cheeseburger", category="Classic", image="classic",
        description="The timeless classic with a juicy beef patty, melted cheese, lettuce, tomato and special sauce.",
        ingredients=["1 lb ground beef (80/20)", "4 hamburger buns", "4 slices American cheese",
                     "1 tomato, sliced", "Lettuce leaves", "1 red onion, sliced", "4 tbsp mayonnaise",
                     "2 tbsp ketchup", "1 tbsp mustard", "Salt and pepper to taste"],
        instructions=["Form the beef into 4 patties and season both sides.",
                      "Cook on a hot grill for 3-4 minutes per side.",
                      "Melt the cheese over the patties in the last minute.",
                      "Mix mayonnaise, ketchup and mustard into a sauce.",
                      "Assemble on toasted buns with the vegetables."],
        cook_time="15 min", prep_time="10 min", total_time="25 mins", calories=650,
        rating=4.8, difficulty="Easy", is_recommended=False, macros=(35, 40, 38),
    ),
    _recipe(
        id="2", name="Mushroom Swiss Burger", category="Gourmet", image="mushroomSwiss",
        description="Sautéed mushrooms, caramelized onions and melted Swiss cheese on a beef patty.",
        ingredients=["1 lb ground beef (80/20)", "4 hamburger buns", "4 slices Swiss cheese",
                     "8 oz mushrooms, sliced", "1 large onion, sliced", "2 tbsp butter",
                     "2 cloves garlic, minced", "2 tbsp Worcestershire sauce"],
        instructions=["Caramelize the onions for about 15 minutes.",
                      "Add mushrooms and garlic and cook until soft.",
                      "Cook the seasoned patties in butter, 4-5 minutes per side.",
                      "Top with Swiss cheese and cover to melt.",
                      "Serve on buns with the mushroom mixture."],
        cook_time="25 min", prep_time="15 min", total_time="40 mins", calories=720,
        rating=4.6, difficulty="Medium", is_recommended=True, macros=(38, 42, 44),
    ),
    _recipe(
        id="3", name="Veggie Burger Deluxe", category="Vegetarian", image="veggie",
        description="A hearty black bean and quinoa patty with avocado and chipotle mayo.",
        ingredients=["1 can black beans, drained", "1 cup cooked quinoa", "1/2 cup breadcrumbs",
                     "1 egg", "1 tsp cumin", "4 whole wheat buns", "1 avocado, sliced",
                     "Plant-based chipotle mayo"],
        instructions=["Mash the beans and mix with quinoa, breadcrumbs, egg and cumin.",
                      "Shape into 4 patties and chill for 15 minutes.",
                      "Pan-fry 5 minutes per side until crisp.",
                      "Serve on buns with avocado and chipotle mayo."],
        cook_time="25 min", prep_time="20 min", total_time="45 mins", calories=420,
        rating=4.5, difficulty="Medium", is_recommended=False, macros=(18, 58, 14),
    ),
    _recipe(
        id="4", name="Spicy Jalapeño Burger", category="Spicy", image="spicy",
        description="Pepper jack cheese, fresh jalapeños and a chipotle kick.",
        ingredients=["1 lb ground beef (80/20)", "4 brioche buns", "4 slices pepper jack cheese",
                     "2 jalapeños, sliced", "1 tsp cayenne pepper", "Chipotle mayo", "Lettuce leaves"],
        instructions=["Season the beef with cayenne and form 4 patties.",
                      "Grill 4 minutes per side.",
                      "Melt pepper jack cheese on top.",
                      "Assemble with jalapeños, lettuce and chipotle mayo."],
        cook_time="15 min", prep_time="15 min", total_time="30 mins", calories=680,
        rating=4.7, difficulty="Medium", is_recommended=True, macros=(36, 38, 42),
    ),
    _recipe(
        id="5", name="BBQ Bacon Burger", category="BBQ", image="bbq",
        description="Smoky barbecue sauce, crispy bacon and onion rings.",
        ingredients=["1 lb ground beef (80/20)", "8 slices bacon", "4 slices cheddar cheese",
                     "1/2 cup BBQ sauce", "8 onion rings", "4 hamburger buns"],
        instructions=["Cook the bacon until crispy.",
                      "Grill the patties, brushing with BBQ sauce.",
                      "Melt cheddar on the patties.",
                      "Stack with bacon and onion rings on the buns."],
        cook_time="20 min", prep_time="15 min", total_time="35 mins", calories=780,
        rating=4.9, difficulty="Medium", is_recommended=False, macros=(42, 48, 46),
    ),
    _recipe(
        id="6", name="Mediterranean Lamb Burger", category="Gourmet", image="lamb",
        description="Spiced lamb with feta, tzatziki and roasted red peppers.",
        ingredients=["1 lb ground lamb", "1 tsp cumin", "2 cloves garlic, minced",
                     "1/2 cup feta cheese", "Tzatziki", "Roasted red peppers", "4 pita buns"],
        instructions=["Mix the lamb with garlic and cumin and form patties.",
                      "Grill 4-5 minutes per side.",
                      "Serve on pita buns with feta, peppers and tzatziki."],
        cook_time="15 min", prep_time="40 min", total_time="55 mins", calories=580,
        rating=4.7, difficulty="Medium", is_recommended=True, macros=(32, 34, 34),
    ),
    _recipe(
        id="7", name="Portobello Mushroom Burger", category="Vegetarian", image="portobello",
        description="Marinated grilled portobello caps with provolone and pesto.",
        ingredients=["4 large portobello caps", "1/4 cup balsamic vinegar", "2 tbsp olive oil",
                     "4 slices provolone cheese", "Basil pesto", "4 ciabatta buns"],
        instructions=["Marinate the mushroom caps in balsamic and oil for 30 minutes.",
                      "Grill 5 minutes per side.",
                      "Top with provolone until melted.",
                      "Serve on ciabatta with pesto."],
        cook_time="15 min", prep_time="40 min", total_time="55 mins", calories=380,
        rating=4.5, difficulty="Easy", is_recommended=False, macros=(16, 36, 20),
    ),
    _recipe(
        id="8", name="Hawaiian Teriyaki Burger", category="Gourmet", image="hawaiian",
        description="Teriyaki-glazed beef with grilled pineapple.",
        ingredients=["1 lb ground beef (80/20)", "1/2 cup teriyaki sauce", "4 pineapple rings",
                     "4 slices Swiss cheese", "Red onion", "4 Hawaiian sweet rolls"],
        instructions=["Brush the patties with teriyaki and grill.",
                      "Grill the pineapple rings for 2 minutes per side.",
                      "Assemble with Swiss cheese, pineapple and onion."],
        cook_time="20 min", prep_time="15 min", total_time="35 mins", calories=650,
        rating=4.6, difficulty="Medium", is_recommended=True, macros=(34, 52, 32),
    ),
    _recipe(
        id="9", name="Double Bacon Smash Burger", category="Classic", image="doubleBacon",
        description="Two crispy smashed patties with double bacon and American cheese.",
        ingredients=["1.5 lb ground beef (80/20)", "8 slices bacon", "8 slices American cheese",
                     "Pickles", "Special sauce", "4 potato buns"],
        instructions=["Cook the bacon and set aside.",
                      "Smash beef balls onto a very hot griddle.",
                      "Flip after 2 minutes and add cheese.",
                      "Stack two patties per bun with bacon and pickles."],
        cook_time="15 min", prep_time="15 min", total_time="30 mins", calories=950,
        rating=4.9, difficulty="Medium", is_recommended=False, macros=(58, 40, 62),
    ),
    _recipe(
        id="10", name="Turkey Avocado Burger", category="Healthy", image="turkey",
        description="Lean turkey patty with avocado and sprouts.",
        ingredients=["1 lb ground turkey", "1 avocado, sliced", "Alfalfa sprouts",
                     "1 tomato, sliced", "Gluten-Free Bun", "Greek yogurt sauce"],
        instructions=["Season the turkey and form 4 patties.",
                      "Cook 6 minutes per side until cooked through.",
                      "Serve with avocado, sprouts, tomato and yogurt sauce."],
        cook_time="15 min", prep_time="20 min", total_time="35 mins", calories=420,
        rating=4.4, difficulty="Easy", is_recommended=True, macros=(32, 30, 18),
    ),
    _recipe(
        id="11", name="Blue Cheese Burger", category="Gourmet", image="blueCheese",
        description="Bold blue cheese with caramelized onions and arugula.",
        ingredients=["1 lb ground beef (80/20)", "1/2 cup blue cheese crumbles",
                     "1 onion, caramelized", "Arugula", "4 brioche buns"],
        instructions=["Grill the patties to medium.",
                      "Top with blue cheese to soften.",
                      "Serve with caramelized onions and arugula."],
        cook_time="20 min", prep_time="15 min", total_time="35 mins", calories=700,
        rating=4.7, difficulty="Medium", is_recommended=False, macros=(38, 36, 44),
    ),
    _recipe(
        id="12", name="Breakfast Burger", category="Specialty", image="breakfast",
        description="Fried egg, crispy bacon, cheddar and a hash brown patty.",
        ingredients=["1 lb ground beef (80/20)", "4 eggs", "8 slices bacon",
                     "4 slices cheddar cheese", "4 hash brown patties", "4 English muffins"],
        instructions=["Cook the bacon and hash browns.",
                      "Grill the patties and melt cheddar on top.",
                      "Fry the eggs sunny side up.",
                      "Stack everything on toasted muffins."],
        cook_time="20 min", prep_time="10 min", total_time="30 mins", calories=850,
        rating=4.9, difficulty="Medium", is_recommended=True, macros=(48, 44, 54),
    ),
    _recipe(
        id="13", name="Kimchi Burger", category="Fusion", image="kimchi",
        description="Korean-inspired burger with kimchi and gochujang mayo.",
        ingredients=["1 lb ground beef (80/20)", "1 cup kimchi", "2 tbsp gochujang",
                     "1/4 cup mayonnaise", "Green onions", "4 sesame buns"],
        instructions=["Mix gochujang with mayonnaise.",
                      "Sear the patties until crispy.",
                      "Top with kimchi and green onions and serve."],
        cook_time="15 min", prep_time="10 min", total_time="25 mins", calories=720,
        rating=4.8, difficulty="Medium", is_recommended=False, macros=(36, 42, 44),
    ),
    _recipe(
        id="14", name="Salmon Burger", category="Seafood", image="salmonBurger",
        description="Fresh salmon with dill and lemon.",
        ingredients=["1 lb fresh salmon, finely chopped", "1 tbsp fresh dill", "1 lemon, zested",
                     "1/2 cup panko breadcrumbs", "1 egg", "Tartar sauce", "4 brioche buns"],
        instructions=["Mix salmon, dill, lemon zest, panko and egg.",
                      "Form patties and chill for 10 minutes.",
                      "Pan-sear 4 minutes per side.",
                      "Serve with tartar sauce."],
        cook_time="10 min", prep_time="15 min", total_time="25 mins", calories=520,
        rating=4.4, difficulty="Easy", is_recommended=True, macros=(34, 32, 26),
    ),
]


def get_builtin_recipes() -> List[Recipe]:
    """Return the built-in catalogue in display order"""
    return list(_BURGERS)
