import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.models.user import User
from app.schemas.user import validate_user

logger = logging.getLogger(__name__)

USERS_SEQUENCE = "users"


class UserStorageError(Exception):
    """Échec de l'accès à la collection users."""


class DuplicateEmailError(UserStorageError):
    def __init__(self, email: str):
        super().__init__(f"Email already exists: {email}")
        self.email = email


async def create_indexes(db: AsyncIOMotorDatabase):
    """
    Créer les index nécessaires pour la collection users.
    """
    await db.users.create_index("email", unique=True)


async def next_user_id(db: AsyncIOMotorDatabase) -> int:
    """
    Réserver le prochain identifiant utilisateur.

    Le compteur vit dans la collection `counters` et n'est jamais
    décrémenté : un identifiant n'est pas réutilisé après suppression.
    """
    counter = await db.counters.find_one_and_update(
        {"_id": USERS_SEQUENCE},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["seq"]


async def create_user(db: AsyncIOMotorDatabase, user: User) -> User:
    """
    Valider puis insérer un nouvel utilisateur.

    Args:
        db: Base de données MongoDB
        user: Enregistrement à persister (son id est ignoré)

    Returns:
        User: L'utilisateur persisté, avec son id

    Raises:
        pydantic.ValidationError: Si les contraintes ne sont pas respectées
        DuplicateEmailError: Si l'email est déjà utilisé
        UserStorageError: Si l'insertion échoue
    """
    validate_user(user)
    try:
        new_user = user.model_copy(update={"id": await next_user_id(db)})
        await db.users.insert_one(new_user.to_document())
    except DuplicateKeyError as e:
        raise DuplicateEmailError(user.email) from e
    except PyMongoError as e:
        raise UserStorageError(f"Error creating user: {e}") from e

    logger.info(f"Created user {new_user.id}")
    return new_user


async def get_user_by_id(db: AsyncIOMotorDatabase, user_id: int) -> Optional[User]:
    try:
        doc = await db.users.find_one({"_id": user_id})
    except PyMongoError as e:
        raise UserStorageError(f"Error fetching user {user_id}: {e}") from e
    return User.from_document(doc) if doc else None


async def get_user_by_email(db: AsyncIOMotorDatabase, email: str) -> Optional[User]:
    try:
        doc = await db.users.find_one({"email": email})
    except PyMongoError as e:
        raise UserStorageError(f"Error fetching user by email: {e}") from e
    return User.from_document(doc) if doc else None


async def list_users(db: AsyncIOMotorDatabase, skip: int = 0, limit: int = 100) -> List[User]:
    """
    Lister les utilisateurs par id croissant.
    """
    try:
        cursor = db.users.find({}, sort=[("_id", ASCENDING)], skip=skip, limit=limit)
        return [User.from_document(doc) async for doc in cursor]
    except PyMongoError as e:
        raise UserStorageError(f"Error listing users: {e}") from e


async def update_user(db: AsyncIOMotorDatabase, user_id: int, update_data: Dict[str, Any]) -> Optional[User]:
    """
    Mettre à jour un utilisateur.

    L'id n'est jamais modifié. L'enregistrement fusionné est revalidé
    avant l'écriture.

    Returns:
        User ou None: L'utilisateur mis à jour, ou None s'il n'existe pas
    """
    existing = await get_user_by_id(db, user_id)
    if existing is None:
        return None

    changes = {k: v for k, v in update_data.items() if k != "id"}
    updated = existing.model_copy(update=changes)
    validate_user(updated)

    try:
        result = await db.users.update_one(
            {"_id": user_id},
            {"$set": updated.model_dump(exclude={"id"})}
        )
    except DuplicateKeyError as e:
        raise DuplicateEmailError(updated.email) from e
    except PyMongoError as e:
        raise UserStorageError(f"Error updating user {user_id}: {e}") from e

    # Supprimé entre la lecture et l'écriture
    if result.matched_count == 0:
        return None

    logger.info(f"Updated user {user_id}")
    return updated


async def delete_user(db: AsyncIOMotorDatabase, user_id: int) -> bool:
    try:
        result = await db.users.delete_one({"_id": user_id})
    except PyMongoError as e:
        raise UserStorageError(f"Error deleting user {user_id}: {e}") from e
    if result.deleted_count == 0:
        return False

    logger.info(f"Deleted user {user_id}")
    return True
