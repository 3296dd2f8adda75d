import logging

import requests

from robot_canvas.brain.errors import (
    EmptyResponseError,
    ExternalServiceError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/png"


def split_data_url(image_data):
    """
    Strips a data-URL prefix ("data:image/png;base64,...") from an image
    payload. Returns (base64_data, mime_type); raw base64 is returned as-is
    with the default PNG mime type.
    """
    if "," not in image_data:
        return image_data, DEFAULT_MIME_TYPE

    header, _, data = image_data.partition(",")
    mime_type = DEFAULT_MIME_TYPE
    if header.startswith("data:"):
        declared = header[len("data:"):].split(";")[0].strip()
        if declared:
            mime_type = declared
    return data, mime_type


class GeminiRoboticsClient:
    """
    Thin client for the Gemini Robotics-ER generateContent endpoint.
    One blocking POST per call; no retries.
    """

    def __init__(self, settings, session=None):
        self.settings = settings
        self.session = session or requests.Session()

    def build_request(self, prompt, image_base64, mime_type=DEFAULT_MIME_TYPE):
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": prompt},
                        {
                            "inline_data": {
                                "mime_type": mime_type,
                                "data": image_base64,
                            }
                        },
                    ],
                }
            ],
            "generationConfig": {
                "response_mime_type": "application/json",
                "temperature": self.settings.temperature,
            },
        }

    def generate(self, prompt, image_base64, mime_type=DEFAULT_MIME_TYPE):
        """
        Sends the prompt and image to the planner.
        Returns the text of the first candidate, or raises ExternalServiceError /
        EmptyResponseError. The caller turns those into a PlanFailure.
        """
        headers = {
            "Content-Type": "application/json; charset=utf-8",
            "x-goog-api-key": self.settings.gemini_api_key,
        }
        body = self.build_request(prompt, image_base64, mime_type)

        logger.info("Calling %s (image %s, %d chars)", self.settings.robotics_model, mime_type, len(image_base64))
        try:
            response = self.session.post(
                self.settings.endpoint,
                headers=headers,
                json=body,
                timeout=self.settings.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            raise ExternalServiceError(f"Robotics API request failed: {e}", status=None, body=str(e)) from e

        if not response.ok:
            raise ExternalServiceError(
                f"Robotics API error: {response.status_code} {response.reason}. {response.text}",
                status=response.status_code,
                body=response.text,
            )

        try:
            reply = response.json()
        except ValueError:
            raise MalformedResponseError(f"Robotics API returned a non-JSON body: {response.text[:200]}") from None

        return extract_text(reply)


def extract_text(reply):
    """Pulls candidates[0].content.parts[0].text out of a generateContent reply."""
    candidates = reply.get("candidates") if isinstance(reply, dict) else None
    if not candidates:
        raise EmptyResponseError("Robotics API returned no candidates")

    first = candidates[0]
    try:
        text = first["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None

    if not isinstance(text, str) or not text.strip():
        finish_reason = first.get("finishReason") if isinstance(first, dict) else None
        raise MalformedResponseError(
            f"Robotics API candidate contained no text (finishReason={finish_reason})"
        )
    return text
