import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional
from urllib.parse import parse_qs

import socketio
from jose import JWTError
from pydantic import ValidationError

from app.core.database import SessionLocal
from app.core.security import decode_access_token
from app.crud.user import user as user_crud
from app.schemas.token import TokenPayload

logger = logging.getLogger(__name__)


def user_room(user_id: str) -> str:
    return f"user:{user_id}"


def _convert_datetime_to_iso(data):
    if isinstance(data, datetime):
        return data.isoformat()
    if isinstance(data, dict):
        return {k: _convert_datetime_to_iso(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_convert_datetime_to_iso(elem) for elem in data]
    return data


class RealtimeContext:
    """Owns the socket.io server for one application instance.

    Built by the app factory, stored on ``app.state.realtime`` and handed to
    whatever needs to push events. Emitting is a no-op until ``start`` runs
    and again after ``stop``.
    """

    def __init__(self, cors_allowed_origins: Any = "*", session_factory=SessionLocal):
        self.sio = socketio.AsyncServer(async_mode="asgi", cors_allowed_origins=cors_allowed_origins)
        self.asgi_app = socketio.ASGIApp(self.sio)
        self.session_factory = session_factory
        self.user_sessions: Dict[str, dict] = {}
        self.started = False
        self._register_events()

    def start(self):
        self.started = True
        logger.info("Realtime context started")

    def stop(self):
        self.started = False
        self.user_sessions.clear()
        logger.info("Realtime context stopped")

    async def emit_to_users(self, user_ids: Iterable[str], event: str, payload: Dict[str, Any]) -> int:
        if not self.started:
            return 0
        data = _convert_datetime_to_iso(payload)
        delivered = 0
        for user_id in user_ids:
            try:
                await self.sio.emit(event, data, room=user_room(user_id))
                delivered += 1
            except Exception as e:
                logger.error(f"Failed to emit '{event}' to user {user_id}: {e}")
        return delivered

    def _authenticate(self, token: str) -> Optional[str]:
        db = self.session_factory()
        try:
            payload = decode_access_token(token)
            token_data = TokenPayload(**payload)
            user = user_crud.get_active(db, token_data.user_id)
            return user.id if user else None
        finally:
            db.close()

    def _register_events(self):
        sio_server = self.sio

        @sio_server.event
        async def connect(sid, environ, auth=None):
            token = None
            if auth and 'token' in auth:
                token = auth['token']
            elif environ.get('QUERY_STRING'):
                query_params = parse_qs(environ.get('QUERY_STRING', ''))
                token = query_params.get('token', [None])[0]

            if not token:
                logger.warning(f"Connection rejected for {sid}: No token")
                return False

            try:
                user_id = self._authenticate(token)
            except (JWTError, ValidationError) as e:
                logger.warning(f"Connection rejected for {sid}: invalid token ({e})")
                return False

            if not user_id:
                logger.warning(f"Connection rejected for {sid}: User not found for token")
                return False

            self.user_sessions[sid] = {'user_id': user_id, 'connected_at': datetime.utcnow()}
            await sio_server.enter_room(sid, user_room(user_id))
            logger.info(f"Socket {sid} connected for user {user_id}")
            return True

        @sio_server.event
        async def disconnect(sid, *args):
            session = self.user_sessions.pop(sid, None)
            if session:
                logger.info(f"Socket {sid} disconnected for user {session['user_id']}")
