# backend/routes/users.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from database import get_user_repo
from models.users import User
from repositories.user import UserRepository
from utils.audit import client_ip, write_log
from schemas.user import UserCreate, UserUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


# A numeric reference is an id, anything else a username.
# A user whose name is all digits (e.g. "2024") can only be reached by id here.
def _lookup(users: UserRepository, user_ref: str) -> Optional[User]:
    if user_ref.isdigit():
        return users.get(int(user_ref))
    return users.get_by_username(user_ref)


@router.get("", response_model=List[UserResponse])
def get_users(users: UserRepository = Depends(get_user_repo)):
    return [UserResponse.model_validate(u) for u in users.get_all()]


@router.get("/{username}/login/{password}", response_model=UserResponse, status_code=status.HTTP_202_ACCEPTED)
def login(username: str, password: str, request: Request, users: UserRepository = Depends(get_user_repo)):
    user = users.get_by_username(username)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")

    # Validate credentials and log failure on error
    if not users.login(user.id, password):
        write_log(username=username, action="LOGIN", resource="auth", status="FAIL", ip=client_ip(request))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    write_log(username=username, action="LOGIN", resource="auth", ip=client_ip(request),
              meta={"admin": user.is_admin})
    return UserResponse.model_validate(users.get(user.id))


@router.get("/{username}/logout")
def logout(username: str, request: Request, users: UserRepository = Depends(get_user_repo)):
    user = users.get_by_username(username)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")

    if not users.logout(user.id):
        write_log(username=username, action="LOGOUT", resource="auth", status="FAIL", ip=client_ip(request))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")

    write_log(username=username, action="LOGOUT", resource="auth", ip=client_ip(request))
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{user_ref}", response_model=UserResponse)
def get_user(user_ref: str, users: UserRepository = Depends(get_user_repo)):
    user = _lookup(users, user_ref)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)


# Register a new user
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, request: Request, users: UserRepository = Depends(get_user_repo)):
    new_user = users.create(payload.username, payload.password)
    if new_user is None:
        write_log(username=payload.username, action="REGISTER", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"reason": "Username exists"})
        raise HTTPException(status_code=409, detail="Username already registered")

    write_log(username=new_user.username, action="REGISTER", resource="auth",
              ip=client_ip(request), meta={"user_id": new_user.id})
    return UserResponse.model_validate(new_user)


@router.put("", response_model=UserResponse)
def update_user(payload: UserUpdate, request: Request, users: UserRepository = Depends(get_user_repo)):
    updated = users.update(User(payload.id, payload.username, payload.password))
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")

    write_log(username=updated.username, action="USER_UPDATE", resource="user",
              ip=client_ip(request), meta={"user_id": updated.id})
    return UserResponse.model_validate(updated)


@router.delete("/{user_ref}")
def delete_user(user_ref: str, request: Request, users: UserRepository = Depends(get_user_repo)):
    if user_ref.isdigit():
        deleted = users.delete(int(user_ref))
    else:
        deleted = users.delete_by_username(user_ref)
    if not deleted:
        raise HTTPException(status_code=404, detail="User not found")

    write_log(username=None, action="USER_DELETE", resource="user", ip=client_ip(request),
              meta={"user": user_ref})
    return Response(status_code=status.HTTP_200_OK)
