"""
FastAPI to-do list service.

Layers, innermost first: the Task entity (models), task repositories
(repositories, db), use-case handlers (handlers) and the HTTP controller
(routers.todos), wired together by main.create_app().
"""
