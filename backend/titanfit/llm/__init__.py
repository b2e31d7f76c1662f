"""
AI integration package.

- service: GenerationService with the four JSON-returning model calls
  (food photo analysis, food lookup, diet plan, workout plan)
- prompts: prompt templates
- tools: reply cleanup and message helpers
"""
