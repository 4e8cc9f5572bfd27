from pydantic import BaseModel


class PostgresDatabaseConnection(BaseModel):
    url_scheme: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    user: str = ""
    password: str = ""
    database: str = ""
