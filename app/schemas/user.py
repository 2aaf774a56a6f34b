from typing import Optional
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from app.models.user import User


def check_name(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValueError("Name is required")
    if not 2 <= len(value) <= 50:
        raise ValueError("Name must be between 2 and 50 characters")
    return value


def check_email(value: Optional[str]) -> str:
    """
    Vérifier le format de l'email sans le normaliser : la valeur stockée
    est celle fournie par le client.
    """
    if value is None or not value.strip():
        raise ValueError("Email is required")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Email should be valid")
    return value


def check_phone(value: Optional[str]) -> Optional[str]:
    if value is not None and not 10 <= len(value) <= 15:
        raise ValueError("Phone number must be between 10 and 15 characters")
    return value


# --- Schéma pour la création d'un utilisateur ---
class UserCreate(BaseModel):
    name: Optional[str] = Field(None, validate_default=True, description="Nom complet (2 à 50 caractères)")
    email: Optional[str] = Field(None, validate_default=True, description="Adresse email valide et unique")
    phone: Optional[str] = Field(None, description="Numéro de téléphone (10 à 15 caractères)")

    @field_validator("name")
    @classmethod
    def name_valid(cls, value: Optional[str]) -> str:
        return check_name(value)

    @field_validator("email")
    @classmethod
    def email_valid(cls, value: Optional[str]) -> str:
        return check_email(value)

    @field_validator("phone")
    @classmethod
    def phone_valid(cls, value: Optional[str]) -> Optional[str]:
        return check_phone(value)


# --- Schéma pour la mise à jour (tous les champs optionnels) ---
class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    # None est laissé passer ici : l'enregistrement fusionné est revalidé par update_user
    @field_validator("name")
    @classmethod
    def name_valid(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_name(value)

    @field_validator("email")
    @classmethod
    def email_valid(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_email(value)

    @field_validator("phone")
    @classmethod
    def phone_valid(cls, value: Optional[str]) -> Optional[str]:
        return check_phone(value)


# --- Schéma pour la réponse API utilisateur ---
class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None


def validate_user(user: User) -> UserCreate:
    """
    Appliquer les contraintes de UserCreate à un enregistrement User.

    Raises:
        pydantic.ValidationError: si une contrainte n'est pas respectée
    """
    return UserCreate.model_validate(user.model_dump(exclude={"id"}))
