"""List catalog permissions use case."""

from evently.domain.entities import Permission


class ListPermissionsUseCase:
    """Catalog permissions ordered by resource and action."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        resource: str | None = None,
        category: str | None = None,
    ) -> list[Permission]:
        async with self._uow_factory() as uow:
            return await uow.permissions.list(resource=resource, category=category)
