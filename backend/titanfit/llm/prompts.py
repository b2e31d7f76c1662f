"""
Prompt templates for the generation service.
"""

FOOD_IMAGE_PROMPT = """
Analyze this image of food. Identify the main dish or components.
1. Estimate the TOTAL weight in grams of the serving shown.
2. Estimate the TOTAL macronutrients (Calories, Protein, Carbs, Fats, Fiber) for that entire estimated weight.
3. Provide a confidence score between 0 and 1 based on how clear the food and portion size are.

Return ONLY valid JSON with this structure, no markdown formatting:
{
  "foodName": "string",
  "grams": number,
  "macros": {
    "calories": number,
    "protein": number,
    "carbs": number,
    "fats": number,
    "fiber": number
  },
  "confidence": number
}
"""

FOOD_SEARCH_PROMPT = """
You are a nutrition database. The user is searching for: "{query}".
Provide standard nutritional info for 100g of this item.
Return ONLY valid JSON:
{{
  "foodName": "Standardized Name",
  "grams": 100,
  "macros": {{
    "calories": number,
    "protein": number,
    "carbs": number,
    "fats": number,
    "fiber": number
  }},
  "confidence": 1
}}
"""

DIET_PLAN_PROMPT = """
Create a personalized daily nutrition plan for a client with these details:
- Age: {age}
- Current Weight: {weight}kg
- Goal: {goal}{gender_line}

1. Calculate appropriate daily macro targets (Calories, Protein, Carbs, Fats, Fiber).
2. Create a meal suggestion for Breakfast, Lunch, Dinner, and Snack that fits these macros.
3. Include diverse options, including healthy Indian cuisine if appropriate or relevant to general healthy eating.

Return ONLY valid JSON:
{{
  "macros": {{
    "calories": number,
    "protein": number,
    "carbs": number,
    "fats": number,
    "fiber": number
  }},
  "mealPlan": {{
    "breakfast": "string",
    "lunch": "string",
    "dinner": "string",
    "snack": "string"
  }}
}}
"""

WORKOUT_PROMPT = """
Create a workout routine for a client with Goal: "{goal}".
Day: {day}
Focus Area: {focus}

Return a workout Title and 4-6 Exercises.
For each exercise, provide name, sets (number), and reps (string range).

Return ONLY valid JSON:
{{
  "title": "string",
  "exercises": [
    {{ "name": "string", "sets": number, "reps": "string" }}
  ]
}}
"""
