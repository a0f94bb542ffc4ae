"""
Service container for dependency injection
"""
from typing import Dict, Any


class ServiceContainer:
    """
    Simple service container for dependency injection
    Provides lazy loading of services so tests can register fakes first
    """

    def __init__(self):
        self._services: Dict[str, Any] = {}

    def get_service(self, service_name: str):
        """
        Get service instance with lazy initialization

        Raises:
            ValueError: If service is not registered
        """
        if service_name not in self._services:
            self._services[service_name] = self._create_service(service_name)

        return self._services[service_name]

    def _create_service(self, service_name: str):
        if service_name == 'upload_service':
            from .upload_service import S3UploadGrantIssuer
            return S3UploadGrantIssuer()
        elif service_name == 'phone_service':
            from .phone_service import DynamoPhoneRecordStore
            return DynamoPhoneRecordStore()
        else:
            raise ValueError(f"Unknown service: {service_name}")

    def register_service(self, service_name: str, service_instance):
        self._services[service_name] = service_instance

    def clear_services(self):
        """Clear all cached services (useful for testing)"""
        self._services.clear()


# Global service container instance
_service_container = ServiceContainer()


def get_service(service_name: str):
    """Get service from global container"""
    return _service_container.get_service(service_name)


def register_service(service_name: str, service_instance):
    """Register service in global container"""
    _service_container.register_service(service_name, service_instance)


def clear_services():
    """Clear all services (useful for testing)"""
    _service_container.clear_services()
