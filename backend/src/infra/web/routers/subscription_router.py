from fastapi import APIRouter, HTTPException, status

from core.domain.subscription import Subscription
from core.exceptions.entity_not_found_error import StatusPageNotFoundError
from core.exceptions.status_page_not_public_error import StatusPageNotPublicError
from core.exceptions.subscription_already_exists_error import SubscriptionAlreadyExistsError
from infra.adapter.postgres_status_page_repository import get_status_page_repository
from infra.adapter.postgres_subscription_repository import get_subscription_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.subscription import SubscriptionCreateDTO, SubscriptionResponseDTO
from use_cases.subscription import CreateSubscriptionUseCase

router = APIRouter(prefix="/subscription", tags=["Subscription"])


@router.post(
    "",
    response_model=SubscriptionResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_subscription(payload: SubscriptionCreateDTO) -> Subscription:
    use_case = CreateSubscriptionUseCase(
        subscription_repository=get_subscription_repository(),
        status_page_repository=get_status_page_repository(),
        clock=get_system_clock(),
    )

    try:
        return await use_case.execute(payload)
    except StatusPageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StatusPageNotPublicError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except SubscriptionAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
