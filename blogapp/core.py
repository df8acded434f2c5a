import os
import logging
from prometheus_client import Counter, start_http_server

logger = logging.getLogger(__name__)


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
SEED_SAMPLE_DATA = env_flag('SEED_SAMPLE_DATA', True)
CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]
METRICS_ENABLED = env_flag('METRICS_ENABLED', True)
METRICS_PORT = int(os.getenv('METRICS_PORT', '8001'))
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '8000'))

POSTS_CREATED = Counter('blog_posts_created_total', 'Posts created')
POSTS_DELETED = Counter('blog_posts_deleted_total', 'Posts deleted')
POST_LIKES = Counter('blog_post_likes_total', 'Likes recorded on posts')
COMMENTS_CREATED = Counter('blog_comments_created_total', 'Comments created')


def init_metrics(port: int = METRICS_PORT):
    """Initialize Prometheus metrics server"""
    try:
        start_http_server(port)
        logger.info(f"Prometheus metrics server started on port {port}")
    except Exception as e:
        logger.warning(f'Prometheus start failed: {e}')
