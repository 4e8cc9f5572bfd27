from pydantic import BaseModel


class SQLiteDatabaseConnection(BaseModel):
    url_scheme: str = "sqlite"
    file_path: str = ".crudservice/crudservice.db"
