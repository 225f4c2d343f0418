"""Find the Kubernetes Ingresses that route traffic to a Service or Deployment."""

__version__ = "0.1.0"
