from fastapi import Request


# one session per request, taken from the factory bound to this app
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
