from app.core.constants import SubjectCollectionEnum
from app.crud.catalog import degree as crud_degree
from app.models.degree import Degree as DegreeModel
from app.schemas.degree import Degree as DegreeSchema
from app.services.catalog import CatalogService, changed_from, updated_to


class DegreeService(CatalogService[DegreeModel]):
    entity_name = "Degree"
    plural_name = "Degrees"
    cache_name = "degree"
    subject_collection = SubjectCollectionEnum.DEGREE.value
    significant_fields = {
        "name": changed_from("Name"),
        "description": updated_to("Description updated"),
    }


degree_service = DegreeService(crud_degree, DegreeSchema)
