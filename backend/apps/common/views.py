import time

from django.core.cache import caches
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse
from django_redis import get_redis_connection
from django_redis.cache import RedisCache

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _cache_check(alias='default'):
    cache = caches[alias]
    if not isinstance(cache, RedisCache):
        logger.debug('Cache health check skipped; backend is not redis', alias=alias)
        return {'status': 'skipped', 'detail': 'cache backend is not redis'}
    try:
        pong = get_redis_connection(alias).ping()
    except Exception as e:  # pragma: no cover - best effort
        logger.warning('Redis health check failed', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    if not pong:
        logger.warning('Redis health check returned unexpected response', alias=alias)
        return {'status': 'fail'}
    logger.debug('Redis health check succeeded', alias=alias)
    return {'status': 'ok'}


def _db_check(alias='default'):
    started = time.time()
    try:
        conn = connections[alias]
        conn.cursor().execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the database and the redis cache."""
    checks = {
        'database': _db_check(),
        'cache': _cache_check(),
    }
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse({'status': overall_status, 'checks': checks}, status=http_status)
