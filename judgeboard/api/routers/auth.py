"""Sign-in, sign-out and current identity routes."""

from __future__ import annotations

from typing import Any, Dict

from authlib.integrations.starlette_client import OAuth, OAuthError
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlmodel import Session

from ...core import (
    FRONTEND_ORIGIN,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    OAUTH_REDIRECT_URL,
    UpstreamError,
    get_session,
)
from ...services.identity import (
    IdentitySession,
    resolve_admin,
    resolve_judge,
    resolve_team,
)
from ..deps import get_identity_session

router = APIRouter(tags=["auth"])

oauth = OAuth()

OAUTH_ENABLED = bool(GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET)

if OAUTH_ENABLED:
    oauth.register(
        name="google",
        client_id=GOOGLE_CLIENT_ID,
        client_secret=GOOGLE_CLIENT_SECRET,
        server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
        client_kwargs={"scope": "openid email profile"},
    )
else:  # pragma: no cover - allows app to boot without credentials
    oauth.register(
        name="google",
        client_id="dummy",
        client_secret="dummy",
        server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
        client_kwargs={"scope": "openid email profile"},
    )


@router.get("/auth/google/start")
async def auth_google_start(request: Request, next: str | None = None):
    """Redirect an administrator to the identity provider."""

    if not OAUTH_ENABLED:
        raise HTTPException(
            status_code=500,
            detail="Google OAuth not configured. Check GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET.",
        )

    if next:
        request.session["next"] = next
    try:
        return await oauth.google.authorize_redirect(request, OAUTH_REDIRECT_URL)
    except OAuthError as exc:
        raise UpstreamError(f"OAuth error: {exc.error}") from exc


@router.get("/auth/google/callback")
async def auth_google_callback(
    request: Request,
    session: Session = Depends(get_session),
    identity_session: IdentitySession = Depends(get_identity_session),
):
    """Finish the provider exchange and sign the administrator in."""

    try:
        token = await oauth.google.authorize_access_token(request)
        userinfo = token.get("userinfo") or await oauth.google.parse_id_token(request, token)
    except OAuthError as exc:
        raise UpstreamError(f"OAuth error: {exc.error}") from exc

    email = userinfo.get("email")
    identity = resolve_admin(
        session,
        email=email,
        sub=userinfo.get("sub"),
        name=userinfo.get("name") or (email.split("@")[0] if email else None),
    )
    identity_session.sign_in(identity)

    next_url = request.session.pop("next", None) or FRONTEND_ORIGIN
    if not str(next_url).startswith(FRONTEND_ORIGIN):
        next_url = FRONTEND_ORIGIN
    return RedirectResponse(next_url, status_code=302)


@router.post("/auth/judge/login")
def judge_login(
    body: Dict[str, Any] = Body(...),
    session: Session = Depends(get_session),
    identity_session: IdentitySession = Depends(get_identity_session),
):
    """Sign a judge in by exact name."""

    identity = resolve_judge(session, body.get("name"))
    return {"user": identity_session.sign_in(identity).to_dict()}


@router.post("/auth/team/login")
def team_login(
    body: Dict[str, Any] = Body(...),
    session: Session = Depends(get_session),
    identity_session: IdentitySession = Depends(get_identity_session),
):
    """Sign a team in by exact name."""

    identity = resolve_team(session, body.get("name"))
    return {"user": identity_session.sign_in(identity).to_dict()}


@router.post("/auth/logout")
def auth_logout(identity_session: IdentitySession = Depends(get_identity_session)):
    identity_session.sign_out()
    return JSONResponse({"ok": True})


@router.get("/me")
def me(identity_session: IdentitySession = Depends(get_identity_session)):
    identity = identity_session.identity
    return {"user": identity.to_dict() if identity else None}


__all__ = ["router"]
