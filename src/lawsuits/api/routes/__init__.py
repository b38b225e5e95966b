from lawsuits.api.routes.lawsuits import lawsuits_bp
from lawsuits.api.routes.monitoring import monitoring_bp

__all__ = ['lawsuits_bp', 'monitoring_bp']
