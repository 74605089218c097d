# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/24 16:44
# @File           : token.py
# @IDE            : PyCharm
# @desc           : token validation

import jwt
from pydantic import BaseModel, ConfigDict
from config import settings
from sqlalchemy.ext.asyncio import AsyncSession
from core.exception import CustomException
from utils import status
from datetime import datetime, timedelta, timezone


class UserInfo(object):
    def __init__(self):
        self.name: str = None
        self.id: str | None = None
        self.role: list = []

    @property
    def is_admin(self) -> bool:
        return any(role in settings.ADMIN_ROLES for role in self.role)


class Auth(BaseModel):
    # 接收任意类型
    model_config = ConfigDict(arbitrary_types_allowed=True)

    user: UserInfo | None = None
    db: AsyncSession

    @property
    def operator(self) -> str:
        """
        name written to created_by / updated_by
        """
        return self.user.name if self.user else settings.DEFAULT_OPERATOR


class AuthToken:
    """
    validate the bearer token of each call and read the user from it
    tokens are issued by the identity service sharing settings.SECRET_KEY
    """

    # 401: token expired, client should refresh it
    # 403: not logged in or token unusable, client should log in again
    error_code = status.HTTP_401_UNAUTHORIZED

    @staticmethod
    def create_token(payload: dict, expires: timedelta = None) -> str:
        """
        sign a token
        :param payload: sub (user name), jti (user id), role (role names)
        :param expires: lifetime, settings.ACCESS_TOKEN_EXPIRE_MINUTES by default
        """
        payload = dict(payload)
        current_time = datetime.now(timezone.utc)
        if expires:
            expire = current_time + expires
        else:
            expire = current_time + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        payload.update({"iat": current_time})
        payload.update({"exp": expire})
        encoded_jwt = jwt.encode(payload, settings.SECRET_KEY, settings.ALGORITHM)
        return encoded_jwt

    @classmethod
    def validate_token(cls, token: str | None) -> UserInfo:
        """
        validate a token
        """
        if not token:
            raise CustomException(
                msg="Please log in first",
                code=status.HTTP_403_FORBIDDEN,
                status_code=status.HTTP_403_FORBIDDEN
            )
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except jwt.exceptions.ExpiredSignatureError:
            # token expires
            raise CustomException(msg="Token expired, please log in again", code=cls.error_code,
                                  status_code=cls.error_code)
        except jwt.exceptions.InvalidTokenError:
            # fail to decode token
            raise CustomException(
                msg="Invalid token, please log in again",
                code=status.HTTP_403_FORBIDDEN,
                status_code=status.HTTP_403_FORBIDDEN
            )

        user = UserInfo()
        user.name = payload.get("sub")
        user.id = payload.get("jti")
        role = payload.get("role") or []
        # a single role claim is accepted too
        user.role = [role] if isinstance(role, str) else list(role)

        if user.id is None or user.name is None:
            # token doesn't have valid info
            raise CustomException(
                msg="Unauthenticated, please log in again",
                code=status.HTTP_403_FORBIDDEN,
                status_code=status.HTTP_403_FORBIDDEN
            )
        return user
