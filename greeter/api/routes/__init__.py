from greeter.api.routes.greeting import router as greeting_router

__all__ = ["greeting_router"]
