"""
Plant Management Application Layer

Commands: CreatePlantCommand, UpdatePlantCommand, DeletePlantCommand
Queries: ListPlantsQuery, GetPlantQuery
"""
