"""Option sets offered by the forms and accepted by the API."""

from django.db import models


class Gender(models.TextChoices):
    MALE = "male", "Male"
    FEMALE = "female", "Female"


class Language(models.TextChoices):
    ARABIC = "arabic", "Arabic"
    ENGLISH = "english", "English"


class Category(models.TextChoices):
    CYBERSECURITY = "cybersecurity", "Cybersecurity"
    CS = "cs", "Computer Science"
    SE = "se", "Software Engineering"
    IS = "is", "Information Systems"
    AI = "ai", "Artificial Intelligence"
    DATA = "data", "Data Science"


class ProjectType(models.TextChoices):
    GROUP = "group", "Group"
    SOLO = "solo", "Solo"
