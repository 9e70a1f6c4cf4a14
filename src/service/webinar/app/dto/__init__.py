from src.service.webinar.app.dto.change_seats_dto import ChangeSeatsRequest

__all__ = ['ChangeSeatsRequest']
