"""
Vertex AI REST client for structured (function-calling) completions.
"""
import json
import logging
from typing import Optional, Dict, Any

import requests
import google.auth
import google.auth.exceptions
import google.auth.transport.requests
from google.oauth2 import service_account

from ...config import VERTEX_LOCATION, MODEL_NAME, LLM_TIMEOUT, MAX_OUTPUT_TOKENS
from ...errors import ModelServiceError, MalformedModelResponseError

logger = logging.getLogger("llm_client")


class VertexRestClient:
    """REST-based client for Vertex AI Gemini models."""

    def __init__(self,
                 project: str,
                 location: str = VERTEX_LOCATION,
                 model: str = MODEL_NAME,
                 credentials_json: Optional[str] = None,
                 timeout: int = LLM_TIMEOUT):
        self.project = project
        self.location = location
        self.model = model
        self.credentials_json = credentials_json
        self.base_url = f"https://{self.location}-aiplatform.googleapis.com/v1"
        self.model_resource = f"projects/{self.project}/locations/{self.location}/publishers/google/models/{self.model}"
        self._creds = None
        self.timeout = timeout

    def _load_credentials(self):
        if self.credentials_json:
            return service_account.Credentials.from_service_account_file(
                self.credentials_json,
                scopes=["https://www.googleapis.com/auth/cloud-platform"],
            )
        creds, _ = google.auth.default(scopes=["https://www.googleapis.com/auth/cloud-platform"])
        return creds

    def _refresh_token(self):
        """Refresh the OAuth token for API calls."""
        try:
            if self._creds is None:
                self._creds = self._load_credentials()
            auth_req = google.auth.transport.requests.Request()
            self._creds.refresh(auth_req)
        except (google.auth.exceptions.GoogleAuthError, OSError, ValueError) as e:
            # ValueError: unreadable service account file
            raise ModelServiceError(f"Could not obtain Vertex credentials: {e}") from e

    def _ensure_token(self):
        """Ensure we have a valid token, refreshing it when missing or expired."""
        if self._creds is None or not self._creds.valid:
            self._refresh_token()

    def generate_function_call(
        self,
        system_instruction: str,
        user_message: str,
        function_declaration: Dict[str, Any],
        temperature: float = 0.0,
        max_output_tokens: int = MAX_OUTPUT_TOKENS,
    ) -> Dict[str, Any]:
        """
        Force the model to answer by calling ``function_declaration``.

        Args:
            system_instruction: System prompt
            user_message: Single user turn
            function_declaration: OpenAPI-style declaration with name and parameters
            temperature: Sampling temperature
            max_output_tokens: Output token cap

        Returns:
            The ``args`` object of the function call

        Raises:
            ModelServiceError: If the endpoint is unreachable or returns an error status
            MalformedModelResponseError: If the response carries no usable function call
        """
        self._ensure_token()
        url = f"{self.base_url}/{self.model_resource}:generateContent"
        function_name = function_declaration["name"]

        body: Dict[str, Any] = {
            "systemInstruction": {
                "parts": [{"text": system_instruction}],
            },
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": user_message}],
                }
            ],
            "tools": [{"functionDeclarations": [function_declaration]}],
            "toolConfig": {
                "functionCallingConfig": {
                    "mode": "ANY",
                    "allowedFunctionNames": [function_name],
                }
            },
            "generationConfig": {
                "temperature": float(temperature),
                "maxOutputTokens": int(max_output_tokens),
            },
        }

        headers = {
            "Authorization": f"Bearer {self._creds.token}",
            "Content-Type": "application/json",
        }

        logger.debug("Requesting function call %s from %s", function_name, self.model)
        try:
            resp = requests.post(url, headers=headers, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("LLM request failed: %s", e)
            raise ModelServiceError(f"Vertex request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("Vertex REST error %s: %s", resp.status_code, resp.text)
            raise ModelServiceError(f"Vertex REST error {resp.status_code}: {resp.text}")

        try:
            resp_json = resp.json()
        except ValueError as e:
            raise MalformedModelResponseError(f"Vertex returned non-JSON body: {resp.text[:200]}") from e

        return self._parse_function_call(resp_json, function_name)

    def _parse_function_call(self, resp_json: Dict[str, Any], function_name: str) -> Dict[str, Any]:
        """
        Pull the function call arguments out of a generateContent response.
        Vertex schema: candidates[0].content.parts[*].functionCall.{name,args}
        """
        if not isinstance(resp_json, dict):
            raise MalformedModelResponseError(f"Model response is not an object: {type(resp_json).__name__}")
        cands = resp_json.get("candidates") or []
        if not isinstance(cands, list) or not cands:
            raise MalformedModelResponseError("No candidates in model response")
        if not isinstance(cands[0], dict):
            raise MalformedModelResponseError(f"Candidate is not an object: {cands[0]!r}")

        content = cands[0].get("content") or {}
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            parts = []
        for part in parts:
            if not isinstance(part, dict) or "functionCall" not in part:
                continue
            call = part["functionCall"] or {}
            if not isinstance(call, dict):
                raise MalformedModelResponseError(f"Function call is not an object: {call!r}")
            if call.get("name") != function_name:
                raise MalformedModelResponseError(
                    f"Model called {call.get('name')!r}, expected {function_name!r}"
                )
            args = call.get("args")
            # Some gateways send arguments as a JSON string
            if isinstance(args, str):
                try:
                    args = json.loads(args)
                except json.JSONDecodeError as e:
                    raise MalformedModelResponseError(f"Unparseable function arguments: {args!r}") from e
            if not isinstance(args, dict):
                raise MalformedModelResponseError(f"Function arguments are not an object: {args!r}")
            logger.debug("Function call %s args: %s", function_name, args)
            return args

        raise MalformedModelResponseError("No function call in model response")
