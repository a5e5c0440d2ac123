"""All magic values live here — no inline literals anywhere else."""

# Providers and default models
PROVIDER_GEMINI = "gemini"
PROVIDER_OPENAI = "openai"
DEFAULT_PROVIDER = PROVIDER_GEMINI
DEFAULT_MODELS = {
    PROVIDER_GEMINI: "gemini-2.5-flash",
    PROVIDER_OPENAI: "gpt-4o",
}

# Wire formats
IMAGE_MIME_TYPE = "image/jpeg"
JSON_MIME_TYPE = "application/json"
OPENAI_SCHEMA_NAME = "food_detection"

# Data files
TAXONOMY_FILENAME = "dish_taxonomy.json"

# User-facing errors
MSG_ANALYSIS_FAILED = (
    "Failed to analyze image. The food might not be recognized "
    "or there was a network issue."
)
MSG_NOT_IDENTIFIED = "Could not identify the food. Please try another photo."
MSG_FALLBACK_TIP = "Stay hydrated by drinking plenty of water throughout the day!"

# Log messages
MSG_CLASSIFY_REMOTE_ERROR = "Inference API error: %s"
MSG_CLASSIFY_BAD_JSON = "Inference response is not valid JSON: %r"
MSG_CLASSIFY_REJECTED = "Model rejected image: %s"
MSG_CLASSIFY_INCOMPLETE = "Inference response missing name or nutrition: %r"
MSG_CLASSIFY_INVALID = "Inference response failed validation: %s"
MSG_TIP_ERROR = "Tip generation error: %s"
MSG_TIP_EMPTY = "Tip generation returned no text"
MSG_CLIENT_READY = "Inference client ready (%s, %s)"

# Daily tip
TIP_PROMPT = (
    "Generate a single, concise, and encouraging nutritional tip for the day, "
    "relevant to Argentine culture. Keep it under 25 words. For example: "
    "'Enjoy a glass of Malbec, but in moderation!' or "
    "'A walk after asado aids digestion.'"
)

# CLI
CMD_CLASSIFY = "classify"
CMD_TIP = "tip"

# Food classification prompt; the dish taxonomy is inserted between the two halves
CLASSIFY_PROMPT_INTRO = """
You are a nutritional expert specialized in Argentine food and everyday international dishes.
Analyze the attached image and identify the SINGLE primary food or dish.

Your goals:
- Always choose the closest reasonable dish/food, even if it is not a perfect match.
- Only use "error" if the image clearly does not contain food or is impossible to interpret.
"""
CLASSIFY_PROMPT_RULES = """
### Behavior rules

1. ALWAYS try to classify the food as one of the items above or the closest similar dish.
   - Example: any spaghetti-like pasta with red sauce -> "Pasta con salsa de tomate".
   - Example: any grilled steak with side -> "Asado" or "meat dish" depending on the image.
2. If there are multiple items on the plate, choose the one that visually occupies the most space.
3. For portionSize, use natural labels like:
   - "1 unit", "2 units"
   - "1 plate", "1 slice", "1 bowl"
   - "100g approx."
4. Nutrition values must be your best realistic estimate for that portion:
   - calories (kcal)
   - protein (grams)
   - carbs (grams)
   - fat (grams)
5. ONLY use error if:
   - The image clearly has no food (for example, a car, a person, a wall), or
   - It is so blurred or dark that you cannot even guess the type of food.

You MUST return a JSON object that matches this structure:

{
  "error": string | null,
  "name": string,
  "portionSize": string,
  "nutrition": {
    "calories": number,
    "protein": number,
    "carbs": number,
    "fat": number
  }
}
"""
