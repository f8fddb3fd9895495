from typing import Annotated

from pydantic import Field

# SQLite and PostgreSQL BIGINT ceiling; anything larger cannot be stored or looked up.
MAX_DB_INT = 2**63 - 1

DbId = Annotated[int, Field(ge=1, le=MAX_DB_INT)]
Count = Annotated[int, Field(ge=0, le=MAX_DB_INT)]
