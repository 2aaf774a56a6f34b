from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from app.config import settings

# Connexion à MongoDB
client = AsyncIOMotorClient(settings.mongo_uri)
db = client[settings.database_name]


# Dépendance pour récupérer la DB
async def get_db() -> AsyncIOMotorDatabase:
    return db
