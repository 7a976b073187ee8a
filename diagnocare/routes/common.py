from fastapi import HTTPException, status

from diagnocare.models.document import is_document_id


def ensure_document_id(value: str) -> str:
    if not is_document_id(value):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Invalid id',
        )
    return value.lower()


def ensure_matched(result, detail: str):
    if result.matched_count == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return result
