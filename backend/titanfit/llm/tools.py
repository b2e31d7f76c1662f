from __future__ import annotations
import json
import secrets
import string
from typing import Any, Dict, List, Optional

from ..exceptions import AIResponseError


def strip_code_fences(text: str) -> str:
    """Drop ```json / ``` markers the model sometimes wraps around JSON."""
    return text.replace("```json", "").replace("```", "").strip()


def parse_json_reply(text: Optional[str]) -> Dict[str, Any]:
    if not text:
        raise AIResponseError("No response from AI")
    return json.loads(strip_code_fences(text))


def ai_exercise_id() -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "ai-" + "".join(secrets.choice(alphabet) for _ in range(9))


def image_message(prompt: str, base64_image: str, mime_type: str) -> List[Dict[str, Any]]:
    """User message carrying one inline image followed by the prompt text."""
    return [
        {
            "role": "user",
            "content": [
                {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{base64_image}"}},
                {"type": "text", "text": prompt},
            ],
        }
    ]
