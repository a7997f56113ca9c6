# Standard library imports
from typing import Any, Dict, List

# Local application imports
from ....domain.repositories.bootcamp_repository import BootcampRepository
from ...dto.bootcamp_dto import BootcampListResponse, PageRef
from ...services.advanced_query import BootcampQuery
from .mappers import to_bootcamp_response


class ListBootcampsUseCase:
    """Use case for listing bootcamps with filtering, select, sort and pagination"""

    def __init__(self, bootcamp_repository: BootcampRepository) -> None:
        self.bootcamp_repository = bootcamp_repository

    async def execute(self, query: BootcampQuery) -> BootcampListResponse:
        """
        List one page of bootcamps

        Args:
            query: Parsed advanced query

        Returns:
            BootcampListResponse; `count` is the number of items on this page
        """
        total = await self.bootcamp_repository.count(query.filters)
        bootcamps = await self.bootcamp_repository.find_many(
            query.filters,
            sort=query.sort,
            skip=query.skip,
            limit=query.limit,
        )

        include = set(query.select) | {"id"} if query.select else None
        data: List[Dict[str, Any]] = [
            to_bootcamp_response(bootcamp).model_dump(mode="json", include=include)
            for bootcamp in bootcamps
        ]

        pagination: Dict[str, PageRef] = {}
        if query.page * query.limit < total:
            pagination["next"] = PageRef(page=query.page + 1, limit=query.limit)
        if query.skip > 0:
            pagination["prev"] = PageRef(page=query.page - 1, limit=query.limit)

        return BootcampListResponse(count=len(data), pagination=pagination, data=data)
