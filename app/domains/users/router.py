"""Users 도메인 라우터"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.schemas import APIResponse, create_response
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserCreate, UserResponse, UserUpdate
from app.domains.users.service import UserService

router = APIRouter()


def get_user_repository(
    session: AsyncSession = Depends(get_db),
) -> UserRepository:
    """UserRepository 의존성"""
    return UserRepository(session)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """UserService 의존성"""
    return UserService(repository)


@router.post(
    "",
    response_model=APIResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """사용자 생성"""
    user = await service.create(user_data)
    return create_response(
        data=UserResponse.model_validate(user),
        message="사용자가 생성되었습니다.",
    )


@router.get("", response_model=APIResponse[list[UserResponse]])
async def get_users(service: UserService = Depends(get_user_service)):
    """사용자 목록 조회"""
    users = await service.find_all()
    return create_response(
        data=[UserResponse.model_validate(user) for user in users],
        message="사용자 목록을 조회했습니다.",
    )


@router.get("/{user_id}", response_model=APIResponse[UserResponse])
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
):
    """사용자 상세 조회"""
    user = await service.find_one(user_id)
    return create_response(
        data=UserResponse.model_validate(user),
        message="사용자 정보를 조회했습니다.",
    )


@router.put("/{user_id}", response_model=APIResponse[UserResponse])
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """사용자 부분 수정"""
    user = await service.update(user_id, user_data)
    return create_response(
        data=UserResponse.model_validate(user),
        message="사용자 정보가 수정되었습니다.",
    )


@router.delete("/{user_id}", response_model=APIResponse[None])
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
):
    """사용자 삭제"""
    await service.remove(user_id)
    return create_response(message="사용자가 삭제되었습니다.")
