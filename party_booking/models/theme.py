from sqlmodel import Field, SQLModel


class PartyTheme(SQLModel, table=True):
    __tablename__ = "party_themes"
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str | None = None
    image: str | None = None


class PartyThemePublic(SQLModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None
