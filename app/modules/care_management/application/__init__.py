"""
Care Management Application Layer

Commands: CreateTaskCommand, UpdateTaskCommand, DeleteTaskCommand
Queries: ListTasksQuery, ListPlantTasksQuery
"""
