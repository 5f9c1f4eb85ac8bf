# portfolio/repositories/publication.py
from portfolio.models import Publication
from portfolio.repositories.base import EntityKind, EntityRepository

PUBLICATION = EntityKind(
    name="publication",
    table="publications",
    model=Publication,
    columns=(
        "title", "authors", "journal", "year", "description",
        "image_url", "publication_url", "color",
    ),
    select_list=(
        "id, title, COALESCE(authors, '') AS authors, COALESCE(journal, '') AS journal, "
        "COALESCE(year, 0) AS year, COALESCE(description, '') AS description, "
        "COALESCE(image_url, '') AS image_url, COALESCE(publication_url, '') AS publication_url, "
        "COALESCE(color, 'red') AS color, created_at"
    ),
    order_by="year DESC, created_at DESC, id DESC",
)


class PublicationRepository(EntityRepository[Publication]):
    kind = PUBLICATION
