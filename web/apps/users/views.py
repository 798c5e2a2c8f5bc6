"""HTTP views for the users app.

Views validate the body with a pydantic DTO, call ``UserService`` inside
``persistence_boundary()`` and serialize the result with ``UserReadDTO``.
"""

from dataclasses import asdict

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.errors import persistence_boundary
from apps.common.schemas import parse_payload
from apps.common.throttling import MethodScopedThrottleMixin

from . import providers
from .domain import NewUser, User, UserId, UserMail, UserName
from .schemas import CreateUserDTO, UserReadDTO


def _serialize(user: User) -> dict:
    return UserReadDTO.model_validate(asdict(user)).model_dump(by_alias=True)


class UsersCollectionView(MethodScopedThrottleMixin, APIView):
    read_scope = "users_list"
    write_scope = "users_create"

    def get(self, request):
        with persistence_boundary():
            users = providers.get_user_service().find_users()
        return Response([_serialize(u) for u in users])

    def post(self, request):
        """Create a user.

        Returns:
            Response: 201 with the created user, 400 on validation errors
            or a duplicate e-mail.
        """
        dto = parse_payload(CreateUserDTO, request.data)
        new_user = NewUser(
            email=UserMail(dto.email),
            name=UserName(dto.name) if dto.name is not None else None,
        )
        with persistence_boundary():
            user = providers.get_user_service().create_user(new_user)
        return Response(_serialize(user), status=status.HTTP_201_CREATED)


class UserDetailView(MethodScopedThrottleMixin, APIView):
    read_scope = "users_detail"

    def get(self, request, user_id: int):
        with persistence_boundary():
            user = providers.get_user_service().find_by_id(UserId(user_id))
        return Response(_serialize(user))
