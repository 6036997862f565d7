from class_select.web.app import create_app

__all__ = ["create_app"]
