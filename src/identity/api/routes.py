"""FastAPI endpoints for the Identity domain."""

import json

from fastapi import APIRouter, Header, HTTPException
from protean.utils.globals import current_domain

from identity.account.account import Account
from identity.account.authentication import SignIn, SignOut, SignUp, UpdateUserMetadata
from identity.account.session import AuthSession
from identity.api.schemas import (
    CreateProfileRequest,
    ProfileIdResponse,
    ProfileResponse,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    StatusResponse,
    UpdateProfileRequest,
    UpdateUserRequest,
    UserResponse,
)
from identity.profile.management import CreateProfile, UpdateProfile
from identity.profile.profile import Profile

auth_router = APIRouter(prefix="/auth", tags=["auth"])
profile_router = APIRouter(prefix="/profiles", tags=["profiles"])


def _bearer_token(authorization: str | None) -> str:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Auth session missing")
    return token


def _session_response(access_token: str) -> SessionResponse:
    session = current_domain.repository_for(AuthSession).find_active(access_token)
    if session is None:
        raise HTTPException(status_code=401, detail="Auth session missing")
    account = current_domain.repository_for(Account).get(session.account_id)
    return SessionResponse(access_token=access_token, user=UserResponse.from_account(account))


# --- Auth ---


@auth_router.post("/signup", status_code=201, response_model=SessionResponse)
async def sign_up(body: SignUpRequest) -> SessionResponse:
    command = SignUp(
        email=body.email,
        password=body.password,
        user_metadata=json.dumps(body.user_metadata) if body.user_metadata else None,
    )
    current_domain.process(command, asynchronous=False)
    token = current_domain.process(SignIn(email=body.email, password=body.password), asynchronous=False)
    return _session_response(token)


@auth_router.post("/signin", response_model=SessionResponse)
async def sign_in(body: SignInRequest) -> SessionResponse:
    token = current_domain.process(SignIn(email=body.email, password=body.password), asynchronous=False)
    return _session_response(token)


@auth_router.post("/signout", response_model=StatusResponse)
async def sign_out(authorization: str | None = Header(None)) -> StatusResponse:
    current_domain.process(SignOut(access_token=_bearer_token(authorization)), asynchronous=False)
    return StatusResponse()


@auth_router.get("/session", response_model=SessionResponse)
async def get_session(authorization: str | None = Header(None)) -> SessionResponse:
    return _session_response(_bearer_token(authorization))


@auth_router.put("/user", response_model=UserResponse)
async def update_user(body: UpdateUserRequest, authorization: str | None = Header(None)) -> UserResponse:
    token = _bearer_token(authorization)
    command = UpdateUserMetadata(access_token=token, user_metadata=json.dumps(body.data))
    current_domain.process(command, asynchronous=False)
    return _session_response(token).user


# --- Profiles ---


@profile_router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(user_id: str) -> ProfileResponse:
    return ProfileResponse.from_profile(current_domain.repository_for(Profile).get(user_id))


@profile_router.post("/{user_id}", status_code=201, response_model=ProfileIdResponse)
async def create_profile(user_id: str, body: CreateProfileRequest) -> ProfileIdResponse:
    command = CreateProfile(
        user_id=user_id,
        email=body.email,
        name=body.name,
        is_admin=body.is_admin,
        avatar=body.avatar,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProfileIdResponse(user_id=result)


@profile_router.put("/{user_id}", response_model=StatusResponse)
async def update_profile(user_id: str, body: UpdateProfileRequest) -> StatusResponse:
    command = UpdateProfile(user_id=user_id, name=body.name, avatar=body.avatar)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
