"""
Testing infrastructure with mock collaborators for the pipelines.
"""
import base64
from typing import Any, Dict, List, Optional, Union

SAMPLE_RESUME_TEXT = """Jane Martinez
Software Engineer
jane.martinez@acme.io
(415) 555-2020

Professional Experience
Senior Frontend Developer at Acme Corp
Built React dashboards and Node.js services.
"""


class MockLLMClient:
    """
    Mock completion client.

    Each response is either a dict of function arguments or an Exception
    instance, which is raised instead of returned.
    """

    def __init__(self, mock_responses: Optional[List[Union[Dict[str, Any], Exception]]] = None):
        self.mock_responses = list(mock_responses or [])
        self.current_response_idx = 0
        self.request_history: List[Dict[str, Any]] = []

    def generate_function_call(self, system_instruction: str, user_message: str,
                               function_declaration: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        """Return (or raise) the next scripted response."""
        self.request_history.append({
            "system_instruction": system_instruction,
            "user_message": user_message,
            "function": function_declaration["name"],
            "kwargs": kwargs,
        })

        if self.current_response_idx < len(self.mock_responses):
            response = self.mock_responses[self.current_response_idx]
            self.current_response_idx += 1
        else:
            # Default: the model found nothing
            response = {"name": "", "email": "", "phone": "", "role": ""}

        if isinstance(response, Exception):
            raise response
        return response


def make_question_items(*pairs) -> List[Dict[str, str]]:
    """Build raw model question items from (text, difficulty) pairs."""
    return [{"text": text, "difficulty": difficulty} for text, difficulty in pairs]


def encode_resume(text: str) -> str:
    """Base64-encode resume text the way the upload handler does for binary files."""
    return base64.b64encode(text.encode("latin-1", errors="replace")).decode("ascii")
