from pydantic import BaseModel


# Fields default to "" so that missing input reaches the workflow's own
# validation and comes back in the envelope rather than as a 422.
class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class SignupRequest(BaseModel):
    email: str = ""
    username: str = ""
    password: str = ""
