from django.db import models


class UserModel(models.Model):
    email = models.EmailField(max_length=254, unique=True)
    name = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        db_table = "users"
        ordering = ["id"]
