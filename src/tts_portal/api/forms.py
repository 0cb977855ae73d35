"""Pydantic models for form submissions."""

from pydantic import BaseModel

from tts_portal.domain.generation import GenerationRequest


class LoginForm(BaseModel):
    email: str
    password: str


class RegisterForm(BaseModel):
    email: str
    password: str
    name: str
    confirm_password: str | None = None


class GenerateForm(BaseModel):
    text: str
    voice_id: str
    language: str = "ko"
    exaggeration: float | None = None
    cfg_weight: float | None = None
    style: str | None = None

    def to_request(self) -> GenerationRequest:
        """Convert to a domain request; explicit values override a named style."""
        if self.style:
            return GenerationRequest.with_style(
                self.text,
                self.voice_id,
                self.language,
                self.style,
                exaggeration=self.exaggeration,
                cfg_weight=self.cfg_weight,
            )
        return GenerationRequest(
            text=self.text,
            voice_id=self.voice_id,
            language=self.language,
            exaggeration=self.exaggeration,
            cfg_weight=self.cfg_weight,
        )
