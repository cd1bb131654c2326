from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

def envelope(message: str, body=None) -> dict:
    return jsonable_encoder({"message": message, "body": body if body is not None else {}})

def success(message: str = "Successful Operation", body=None, status_code: int = status.HTTP_200_OK,
            headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(message, body), headers=headers)

def created(message: str = "Created Successfully", body=None, headers: dict | None = None) -> JSONResponse:
    return success(message, body, status.HTTP_201_CREATED, headers)
