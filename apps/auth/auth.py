# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/24 16:44
# @File           : auth.py
# @IDE            : PyCharm
# @desc           : 获取认证后的信息工具

from sqlalchemy.ext.asyncio import AsyncSession
from core.exception import CustomException
from utils import status
from fastapi import Request, Depends
from config import settings
from core.database import db_getter
from apps.auth.token import UserInfo, Auth, AuthToken


class OpenAuth(AuthToken):
    """
    开放认证，无认证也可以访问
    """

    async def __call__(
            self,
            request: Request,
            token: str = Depends(settings.oauth2_scheme),
            db: AsyncSession = Depends(db_getter)
    ) -> Auth:
        if not settings.OAUTH_ENABLE:
            return Auth(db=db)
        try:
            user: UserInfo = self.validate_token(token)
            return Auth(user=user, db=db)
        except CustomException:
            return Auth(db=db)


class AllUserAuth(AuthToken):
    """
    支持所有用户认证
    获取用户基本信息
    """

    async def __call__(
            self,
            request: Request,
            token: str = Depends(settings.oauth2_scheme),
            db: AsyncSession = Depends(db_getter)
    ) -> Auth:
        if not settings.OAUTH_ENABLE:
            return Auth(db=db)
        user: UserInfo = self.validate_token(token)
        return Auth(user=user, db=db)


class FullAdminAuth(AuthToken):
    """
    管理员认证
    only settings.ADMIN_ROLES may change menus
    """

    async def __call__(
            self,
            request: Request,
            token: str = Depends(settings.oauth2_scheme),
            db: AsyncSession = Depends(db_getter)
    ) -> Auth:
        if not settings.OAUTH_ENABLE:
            return Auth(db=db)
        user: UserInfo = self.validate_token(token)
        if not user.is_admin:
            raise CustomException(msg="No permission", code=status.HTTP_403_FORBIDDEN,
                                  status_code=status.HTTP_403_FORBIDDEN)
        return Auth(user=user, db=db)
