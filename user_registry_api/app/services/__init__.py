"""
Service layer.

``user_service.UserStore`` holds the records and all validation
rules; the API handlers only translate between HTTP and the store.
"""
