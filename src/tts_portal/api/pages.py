"""JSON view models for the portal pages."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from tts_portal.api.forms import GenerateForm, LoginForm, RegisterForm
from tts_portal.api.reference import build_reference
from tts_portal.domain.models import LANGUAGES

if TYPE_CHECKING:
    from tts_portal.containers import AppContainer
    from tts_portal.services.auth import AuthResult

router = APIRouter(prefix="/api", tags=["pages"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/home")
async def home(request: Request, language: str = "ko") -> dict[str, object]:
    """Landing page: languages, voices for the selected language."""
    if language not in LANGUAGES:
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported language: {language}",
        )
    container = _container(request)
    voice_list = await container.catalog_service.list_voices(language)
    return {
        "languages": [
            {"code": code, "label": label} for code, label in LANGUAGES.items()
        ],
        "language": language,
        "total": voice_list.total,
        "voices": [asdict(voice) for voice in voice_list.voices],
        "selected_voice": (
            voice_list.voices[0].voice_id if voice_list.voices else None
        ),
        "featured_voices": [asdict(voice) for voice in voice_list.voices[:8]],
        "authenticated": container.session_store.is_authenticated(),
    }


@router.get("/voices/{voice_id}/sample")
async def voice_sample(voice_id: str, request: Request) -> dict[str, object]:
    """Return a preview URL for a voice."""
    sample = await _container(request).catalog_service.get_voice_sample(voice_id)
    return {
        "voice_id": sample.voice_id,
        "audio_url": sample.audio_url,
        "expires_in": sample.expires_in,
    }


@router.get("/session")
async def session(request: Request) -> dict[str, object]:
    """Return the navbar session state."""
    store = _container(request).session_store
    user = store.get_user()
    return {
        "authenticated": store.is_authenticated(),
        "user": user.to_payload() if user else None,
    }


@router.post("/login")
async def login(form: LoginForm, request: Request) -> dict[str, object]:
    """Sign in with the login form."""
    result = await _container(request).auth_service.login(form.email, form.password)
    return _auth_response(result)


@router.post("/register")
async def register(form: RegisterForm, request: Request) -> dict[str, object]:
    """Create an account with the registration form."""
    result = await _container(request).auth_service.register(
        form.email, form.password, form.name, confirm_password=form.confirm_password
    )
    return _auth_response(result)


@router.post("/logout")
async def logout(request: Request) -> dict[str, str]:
    """Clear the local session."""
    _container(request).auth_service.logout()
    return {"status": "ok"}


@router.get("/dashboard")
async def dashboard(request: Request) -> dict[str, object]:
    """Plan and usage for the signed-in user."""
    snapshot = await _container(request).usage_service.get_dashboard()
    return snapshot.to_dict()


@router.get("/pricing")
async def pricing(request: Request) -> dict[str, object]:
    """Plans with the call-to-action target for the current visitor."""
    container = _container(request)
    plans = await container.pricing_service.list_plans()
    authenticated = container.session_store.is_authenticated()
    return {
        "plans": [plan.to_dict() for plan in plans],
        "cta_path": "/dashboard" if authenticated else "/register",
    }


@router.get("/reference")
async def reference(request: Request) -> dict[str, object]:
    """Static API documentation content."""
    return build_reference(_container(request).settings.tts_api_base_url)


@router.post("/generate", status_code=status.HTTP_202_ACCEPTED)
async def start_generation(form: GenerateForm, request: Request) -> dict[str, object]:
    """Start a generation run in the background."""
    workflow = _container(request).generation_workflow
    workflow.start(form.to_request())
    return {"state": workflow.state.value}


@router.get("/generate")
async def generation_status(request: Request) -> dict[str, object]:
    """Return the current generation state and its terminal outcome."""
    workflow = _container(request).generation_workflow
    return {
        "state": workflow.state.value,
        "outcome": workflow.outcome.to_dict() if workflow.outcome else None,
    }


@router.delete("/generate")
async def cancel_generation(request: Request) -> dict[str, object]:
    """Stop waiting for the active generation run."""
    workflow = _container(request).generation_workflow
    return {"cancelled": workflow.cancel(), "state": workflow.state.value}


def _auth_response(result: AuthResult) -> dict[str, object]:
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return {"user": result.user.to_payload() if result.user else None}
