"""
API Routers - HTTP endpoint handlers

- records: CRUD + search router factory, mounted once per resource
- health: Health checks and collection status
"""
