from .base import TableService


class ExperienceService(TableService):
    table = 'experiences'
    order_by = 'created_at'
    cached = True
