"""Module whose only Router is not named ``router``."""

from switchyard import Router


async def ping(request, response, advance):
    response.end("pong")


api = Router()
api.get("/ping", ping)
