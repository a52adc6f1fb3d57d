"""
Общие модели и события, используемые сервисами.
"""
