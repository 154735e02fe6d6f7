from typing import Optional, Union

from models import Tone

INSTRUCTION = (
    "Generate a professional email reply for the following email content. "
    "Don't include a subject, just keep the body."
)
SEPARATOR = "\nOriginal Email:\n"


def build_prompt(email_content: str, tone: Optional[Union[Tone, str]] = None) -> str:
    """Build the single prompt sent to Gemini for one reply."""
    prompt = INSTRUCTION
    if isinstance(tone, Tone):
        tone = tone.value
    if tone:
        prompt += f" Keep the tone {tone} to write the email."
    return prompt + SEPARATOR + email_content
