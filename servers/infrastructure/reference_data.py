"""
Reference data rows shared by the server and activation key adapters.

Server group types and contact methods are identified by their natural
key (label, id); rows are created on first use.
"""
from typing import Iterable, List

from core.domain.value_objects import ContactMethod, ServerGroupType
from servers.infrastructure.models import ContactMethod as ContactMethodModel
from servers.infrastructure.models import ServerGroupType as ServerGroupTypeModel


def group_type_to_domain(model: ServerGroupTypeModel) -> ServerGroupType:
    return ServerGroupType(label=model.label, id=model.id, name=model.name)


def group_type_models(group_types: Iterable[ServerGroupType]) -> List[ServerGroupTypeModel]:
    """Resolve group type value objects to rows, creating missing ones."""
    rows = []
    for group_type in group_types:
        # pylint: disable=no-member
        row, _ = ServerGroupTypeModel.objects.get_or_create(
            label=group_type.label, defaults={"name": group_type.name}
        )
        rows.append(row)
    return rows


def contact_method_to_domain(model: ContactMethodModel) -> ContactMethod:
    return ContactMethod(id=model.id, label=model.label)


def contact_method_model(method: ContactMethod) -> ContactMethodModel:
    """Resolve a contact method value object to its row, creating it if missing."""
    # pylint: disable=no-member
    row, _ = ContactMethodModel.objects.get_or_create(
        id=method.id, defaults={"label": method.label}
    )
    return row
