import logging
import requests

from ..config import Settings

log = logging.getLogger("llm")

# (connect timeout, read timeout)
DEFAULT_TIMEOUT = (10, 600)

PROVIDERS = ("ollama", "gemini")


# -----------------------------
# Ollama
# -----------------------------
def ollama_generate(
    prompt: str,
    *,
    base_url: str,
    model: str,
    temperature: float,
    max_tokens: int,
) -> str:
    url = f"{base_url.rstrip('/')}/api/generate"

    payload = {
        "model": model,
        "prompt": prompt,
        "stream": False,
        "options": {
            "temperature": float(temperature),
            "num_predict": int(max_tokens),
        },
    }

    r = requests.post(url, json=payload, timeout=DEFAULT_TIMEOUT)
    r.raise_for_status()
    data = r.json()
    return data.get("response", "") or ""


# -----------------------------
# Gemini (google-genai SDK)
# -----------------------------
def gemini_generate(
    client,
    prompt: str,
    *,
    model: str,
    temperature: float,
    max_tokens: int,
) -> str:
    resp = client.models.generate_content(
        model=model,
        contents=prompt,
        config={
            "temperature": float(temperature),
            "max_output_tokens": int(max_tokens),
        },
    )

    text = getattr(resp, "text", None)
    return text or ""


class LLMClient:
    """
    Single-shot completion against the configured provider.

    Errors from the provider propagate to the caller; there is no retry and
    no fallback between providers.
    """

    def __init__(self, settings: Settings):
        provider = (settings.llm_provider or "ollama").lower().strip()
        if provider not in PROVIDERS:
            raise ValueError(f"Unsupported LLM_PROVIDER: {settings.llm_provider!r}")
        self.provider = provider
        self._settings = settings
        self._gemini = None

    def _gemini_client(self):
        if self._gemini is None:
            if not self._settings.gemini_api_key:
                raise RuntimeError("GEMINI_API_KEY is not set")
            from google import genai  # type: ignore
            self._gemini = genai.Client(api_key=self._settings.gemini_api_key)
        return self._gemini

    def generate(
        self,
        prompt: str,
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        log.info("generate provider=%s prompt_len=%s max_tokens=%s", self.provider, len(prompt), max_tokens)

        if self.provider == "gemini":
            return gemini_generate(
                self._gemini_client(),
                prompt,
                model=self._settings.gemini_model,
                temperature=temperature,
                max_tokens=max_tokens,
            )

        return ollama_generate(
            prompt,
            base_url=self._settings.ollama_base_url,
            model=self._settings.ollama_model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
