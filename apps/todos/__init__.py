"""
Todos app - in-memory task list.

Public surface:
- TaskStore (store.py): authoritative owner of all tasks
- build_router (api.py): HTTP operations over a TaskStore
"""
