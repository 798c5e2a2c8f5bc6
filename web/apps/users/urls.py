from django.urls import path

from .views import UserDetailView, UsersCollectionView

app_name = "users"

urlpatterns = [
    path("", UsersCollectionView.as_view(), name="users-collection"),  # GET list / POST create
    path("<int:user_id>/", UserDetailView.as_view(), name="users-detail"),
]
