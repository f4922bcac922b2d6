"""
Remote data gateway - the one place that talks to the backend.

Usage:
    gateway = Gateway(auth=AuthProvider(request))
    rows = gateway.select('projects', filters={'category': 'web'}, order_by='created_at')
    row = gateway.insert('messages', {'name': 'Jane', ...})

Tables are addressed by their database name. Access is checked per table
and operation against POLICIES, the same way row-level security works in
a hosted Postgres: a denied read comes back empty, a denied write raises.
"""

import logging

from django.apps import apps
from django.core.exceptions import FieldError, ValidationError
from django.core.files.storage import InvalidStorageError, storages
from django.db import DatabaseError

from . import conf
from .exceptions import GatewayError

logger = logging.getLogger(__name__)

PUBLIC, AUTHENTICATED, ADMIN, SERVICE = range(4)

_CONTENT = {'select': PUBLIC, 'insert': ADMIN, 'update': ADMIN, 'delete': ADMIN}
_EVENTS = {'select': ADMIN, 'insert': PUBLIC, 'update': SERVICE, 'delete': SERVICE}

POLICIES = {
    'projects': _CONTENT,
    'experiences': _CONTENT,
    'about': _CONTENT,
    'documents': _CONTENT,
    'messages': {'select': ADMIN, 'insert': PUBLIC, 'update': ADMIN, 'delete': ADMIN},
    'page_views': _EVENTS,
    'project_views': _EVENTS,
    'admins': {'select': ADMIN, 'insert': ADMIN, 'update': ADMIN, 'delete': ADMIN},
}

BUCKET_POLICIES = {'read': PUBLIC, 'write': ADMIN}


def _tables():
    return {model._meta.db_table: model for model in apps.get_app_config('portfolio').get_models()}


def _validation_message(error):
    if hasattr(error, 'message_dict'):
        return '; '.join(f"{field}: {' '.join(msgs)}" for field, msgs in error.message_dict.items())
    return ' '.join(error.messages)


class Gateway:
    def __init__(self, auth=None, service_role=False):
        self.auth = auth
        self.service_role = service_role

    # -- access control --

    def access_level(self):
        if self.service_role:
            return SERVICE
        identity = self.auth.get_user() if self.auth is not None else None
        if identity is None or identity.is_demo:
            return PUBLIC
        return ADMIN if identity.is_admin else AUTHENTICATED

    def _allowed(self, table, operation):
        return self.access_level() >= POLICIES.get(table, _CONTENT)[operation]

    def _require_write(self, table, operation):
        if not self._allowed(table, operation):
            raise GatewayError(
                f'new row violates row-level security policy for table "{table}"',
                code='42501',
            )

    def _model(self, table):
        model = _tables().get(table)
        if model is None:
            raise GatewayError(f'relation "public.{table}" does not exist', code='42P01')
        return model

    def _check_columns(self, model, table, names):
        columns = set()
        for field in model._meta.concrete_fields:
            columns.update((field.name, field.attname))
        for name in names:
            if name.split('__')[0] not in columns:
                raise GatewayError(f"Could not find the '{name}' column of '{table}'", code='PGRST204')

    def _queryset(self, table, filters=None, gte=None):
        model = self._model(table)
        filters = filters or {}
        gte = gte or {}
        self._check_columns(model, table, list(filters) + list(gte))
        qs = model.objects.filter(**filters)
        if gte:
            qs = qs.filter(**{f'{field}__gte': value for field, value in gte.items()})
        return qs

    # -- tables --

    def select(self, table, columns=None, filters=None, gte=None, order_by=None, descending=True, limit=None):
        qs = self._queryset(table, filters, gte)
        if not self._allowed(table, 'select'):
            return []
        if columns:
            self._check_columns(qs.model, table, columns)
        if order_by:
            qs = qs.order_by(f'-{order_by}' if descending else order_by)
        else:
            qs = qs.order_by('pk')
        if limit is not None:
            qs = qs[:limit]
        try:
            return list(qs.values(*(columns or ())))
        except (DatabaseError, FieldError) as e:
            raise GatewayError(str(e)) from e

    def count(self, table, filters=None, gte=None):
        qs = self._queryset(table, filters, gte)
        if not self._allowed(table, 'select'):
            return 0
        try:
            return qs.count()
        except DatabaseError as e:
            raise GatewayError(str(e)) from e

    def insert(self, table, row):
        model = self._model(table)
        self._require_write(table, 'insert')
        self._check_columns(model, table, row)
        obj = model(**row)
        self._save(obj)
        return model.objects.filter(pk=obj.pk).values().get()

    def update(self, table, pk, fields):
        model = self._model(table)
        self._require_write(table, 'update')
        self._check_columns(model, table, fields)
        obj = model.objects.filter(pk=pk).first()
        if obj is None:
            return []
        for name, value in fields.items():
            setattr(obj, name, value)
        self._save(obj)
        return list(model.objects.filter(pk=pk).values())

    def delete(self, table, pk):
        model = self._model(table)
        self._require_write(table, 'delete')
        try:
            deleted, _ = model.objects.filter(pk=pk).delete()
        except DatabaseError as e:
            raise GatewayError(str(e)) from e
        # cascades are counted too, report only the addressed table
        return min(deleted, 1)

    def _save(self, obj):
        try:
            obj.full_clean()
            obj.save()
        except ValidationError as e:
            raise GatewayError(_validation_message(e), code='23514') from e
        except DatabaseError as e:
            raise GatewayError(str(e)) from e

    # -- storage --

    def _bucket(self, bucket):
        try:
            return storages[bucket]
        except InvalidStorageError as e:
            raise GatewayError(f'Bucket not found: {bucket}') from e

    def upload(self, bucket, path, content, upsert=False):
        storage = self._bucket(bucket)
        if self.access_level() < BUCKET_POLICIES['write']:
            raise GatewayError('new row violates row-level security policy', code='42501')
        try:
            if storage.exists(path):
                if not upsert:
                    raise GatewayError('The resource already exists', code='409')
                storage.delete(path)
            saved = storage.save(path, content)
        except OSError as e:
            raise GatewayError(str(e)) from e
        logger.debug('Stored %s in bucket %s', saved, bucket)
        return saved

    def public_url(self, bucket, path):
        return self._bucket(bucket).url(path)

    def remove(self, bucket, paths):
        storage = self._bucket(bucket)
        if self.access_level() < BUCKET_POLICIES['write']:
            raise GatewayError('new row violates row-level security policy', code='42501')
        for path in paths:
            try:
                storage.delete(path)
            except OSError as e:
                raise GatewayError(str(e)) from e


def default_bucket():
    return conf.get('STORAGE_BUCKET')
