from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    Enregistrement utilisateur stocké dans la collection `users`.

    Simple conteneur de données : aucune contrainte n'est vérifiée ici,
    la validation est faite par les schémas (voir app.schemas.user).
    """

    id: Optional[int] = Field(None, description="Identifiant attribué par le stockage à la création")
    name: Optional[str] = Field(None, description="Nom complet de l'utilisateur")
    email: Optional[str] = Field(None, description="Adresse email, unique dans la collection")
    phone: Optional[str] = Field(None, description="Numéro de téléphone (optionnel)")

    @classmethod
    def create(cls, name: Optional[str], email: Optional[str], phone: Optional[str] = None) -> "User":
        return cls(name=name, email=email, phone=phone)

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        return cls(id=doc["_id"], name=doc.get("name"), email=doc.get("email"), phone=doc.get("phone"))

    def to_document(self) -> dict:
        return {"_id": self.id, "name": self.name, "email": self.email, "phone": self.phone}
