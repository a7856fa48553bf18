from .task_queries import ListPlantTasksQuery, ListTasksQuery

__all__ = [
    "ListTasksQuery",
    "ListPlantTasksQuery",
]
