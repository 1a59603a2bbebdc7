"""
The canonical Coolify tool registry.

Each entry pairs the advertised ToolDefinition with the Route that turns a
call into a backend request. Order is the advertised order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from coolify_mcp.schemas import HttpMethod, ToolDefinition
from coolify_mcp.tools.routes import (
    DELETE_FLAGS,
    BodyRule,
    QueryParam,
    Route,
    action,
    create,
    delete,
    get,
    update,
)


@dataclass(frozen=True)
class RegisteredTool:
    definition: ToolDefinition
    route: Route

    @property
    def name(self) -> str:
        return self.definition.name


def _str(description: str, **extra: Any) -> dict[str, Any]:
    return {'type': 'string', 'description': description, **extra}


def _num(description: str) -> dict[str, Any]:
    return {'type': 'number', 'description': description}


def _bool(description: str) -> dict[str, Any]:
    return {'type': 'boolean', 'description': description}


def _tool(
        name: str,
        description: str,
        route: Route,
        properties: dict[str, Any] | None = None,
        required: tuple[str, ...] = (),
) -> RegisteredTool:
    schema = {'type': 'object', 'properties': properties or {}, 'required': list(required)}
    return RegisteredTool(
        definition=ToolDefinition(name=name, description=description, inputSchema=schema),
        route=route,
    )


def _uuid_only(kind: str) -> dict[str, Any]:
    return {'uuid': _str(f'{kind} UUID')}


def _placement() -> dict[str, Any]:
    """Where a new resource lands: project, server and environment."""
    return {
        'project_uuid': _str('Project UUID'),
        'server_uuid': _str('Server UUID'),
        'environment_name': _str('Environment name'),
    }


PLACEMENT_REQUIRED = ('project_uuid', 'server_uuid', 'environment_name')
ENV_RENAME = (('env_uuid', 'uuid'),)


# ------------------------------------------------------------------------------
# Health & System, Teams
# ------------------------------------------------------------------------------

_SYSTEM = (
    _tool('coolify_health', 'Check the health status of the Coolify instance', get('/health')),
    _tool('coolify_version', 'Get the current Coolify version', get('/version')),
    _tool('coolify_enable_api', 'Enable the Coolify API (requires root access)', get('/enable')),
    _tool('coolify_list_teams', 'List all teams accessible to the authenticated user', get('/teams')),
    _tool('coolify_get_current_team', 'Get the current team for the API token', get('/teams/current')),
    _tool('coolify_get_team_members', 'Get members of the current team', get('/teams/current/members')),
)

# ------------------------------------------------------------------------------
# Projects & Environments
# ------------------------------------------------------------------------------

_PROJECTS = (
    _tool('coolify_list_projects', 'List all projects', get('/projects')),
    _tool(
        'coolify_get_project',
        'Get a specific project by UUID',
        get('/projects/{uuid}'),
        _uuid_only('Project'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_project',
        'Create a new project',
        create('/projects'),
        {'name': _str('Project name'), 'description': _str('Project description')},
        ('name',),
    ),
    _tool(
        'coolify_update_project',
        'Update an existing project',
        update('/projects/{uuid}'),
        {
            'uuid': _str('Project UUID'),
            'name': _str('New project name'),
            'description': _str('New project description'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_delete_project',
        'Delete a project',
        delete('/projects/{uuid}'),
        _uuid_only('Project'),
        ('uuid',),
    ),
    _tool(
        'coolify_get_project_environment',
        'Get a specific environment within a project',
        get('/projects/{project_uuid}/{environment_name}'),
        {'project_uuid': _str('Project UUID'), 'environment_name': _str('Environment name')},
        ('project_uuid', 'environment_name'),
    ),
    _tool(
        'coolify_create_environment',
        'Create a new environment in a project',
        create('/projects/{project_uuid}/environments'),
        {
            'project_uuid': _str('Project UUID'),
            'name': _str('Environment name'),
            'description': _str('Environment description'),
        },
        ('project_uuid', 'name'),
    ),
    _tool(
        'coolify_delete_environment',
        'Delete an environment from a project',
        delete('/projects/{project_uuid}/{environment_name}'),
        {'project_uuid': _str('Project UUID'), 'environment_name': _str('Environment name')},
        ('project_uuid', 'environment_name'),
    ),
)

# ------------------------------------------------------------------------------
# Servers
# ------------------------------------------------------------------------------

_SERVERS = (
    _tool('coolify_list_servers', 'List all servers', get('/servers')),
    _tool(
        'coolify_get_server',
        'Get a specific server by UUID',
        get('/servers/{uuid}', QueryParam('include_resources', key='resources', flag=True)),
        {'uuid': _str('Server UUID'), 'include_resources': _bool('Include deployed resources')},
        ('uuid',),
    ),
    _tool(
        'coolify_create_server',
        'Create/add a new server',
        create('/servers'),
        {
            'name': _str('Server name'),
            'description': _str('Server description'),
            'ip': _str('Server IP address'),
            'port': _num('SSH port (default: 22)'),
            'user': _str('SSH user (default: root)'),
            'private_key_uuid': _str('UUID of the private key for SSH'),
            'is_build_server': _bool('Use as build server'),
            'instant_validate': _bool('Validate server immediately'),
        },
        ('name', 'ip', 'private_key_uuid'),
    ),
    _tool(
        'coolify_update_server',
        'Update an existing server',
        update('/servers/{uuid}'),
        {
            'uuid': _str('Server UUID'),
            'name': _str('Server name'),
            'description': _str('Server description'),
            'ip': _str('Server IP address'),
            'port': _num('SSH port'),
            'user': _str('SSH user'),
            'private_key_uuid': _str('Private key UUID'),
        },
        ('uuid',),
    ),
    _tool('coolify_delete_server', 'Delete a server', delete('/servers/{uuid}'), _uuid_only('Server'), ('uuid',)),
    _tool(
        'coolify_validate_server',
        'Validate server connectivity and Docker prerequisites',
        get('/servers/{uuid}/validate'),
        _uuid_only('Server'),
        ('uuid',),
    ),
    _tool(
        'coolify_get_server_resources',
        'Get all resources (apps, databases, services) on a server',
        get('/servers/{uuid}/resources'),
        _uuid_only('Server'),
        ('uuid',),
    ),
    _tool(
        'coolify_get_server_domains',
        'Get all domain-to-IP mappings for a server',
        get('/servers/{uuid}/domains'),
        _uuid_only('Server'),
        ('uuid',),
    ),
)

# ------------------------------------------------------------------------------
# GitHub Apps & Private Keys
# ------------------------------------------------------------------------------

_SOURCES = (
    _tool(
        'coolify_list_github_apps',
        'List all GitHub Apps configured in Coolify (needed to get github_app_uuid for private repo deployments)',
        get('/github-apps'),
    ),
    _tool(
        'coolify_list_github_app_repositories',
        "List all repositories accessible by a GitHub App. Use the numeric 'id' from coolify_list_github_apps, "
        'not the uuid.',
        get('/github-apps/{id}/repositories'),
        {'id': _num('GitHub App numeric ID (from coolify_list_github_apps response)')},
        ('id',),
    ),
    _tool('coolify_list_private_keys', 'List all private SSH keys', get('/security/keys')),
    _tool(
        'coolify_get_private_key',
        'Get a specific private key by UUID',
        get('/security/keys/{uuid}'),
        _uuid_only('Private key'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_private_key',
        'Create a new private SSH key',
        create('/security/keys'),
        {
            'name': _str('Key name'),
            'description': _str('Key description'),
            'private_key': _str('The private key content'),
        },
        ('name', 'private_key'),
    ),
    _tool(
        'coolify_update_private_key',
        'Update a private key',
        update('/security/keys/{uuid}'),
        {
            'uuid': _str('Private key UUID'),
            'name': _str('Key name'),
            'description': _str('Key description'),
            'private_key': _str('The private key content'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_delete_private_key',
        'Delete a private key',
        delete('/security/keys/{uuid}'),
        _uuid_only('Private key'),
        ('uuid',),
    ),
)

# ------------------------------------------------------------------------------
# Applications
# ------------------------------------------------------------------------------

_APPLICATIONS = (
    _tool('coolify_list_applications', 'List all applications', get('/applications')),
    _tool(
        'coolify_get_application',
        'Get a specific application by UUID',
        get('/applications/{uuid}'),
        _uuid_only('Application'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_application_public',
        'Create an application from a public Git repository',
        create('/applications/public'),
        {
            **_placement(),
            'git_repository': _str('Git repository URL'),
            'git_branch': _str('Git branch'),
            'build_pack': _str(
                'Build pack to use',
                enum=['nixpacks', 'static', 'dockerfile', 'dockercompose'],
            ),
            'ports_exposes': _str("Ports to expose (e.g., '3000' or '3000,8080')"),
            'name': _str('Application name'),
            'description': _str('Application description'),
            'domains': _str('Custom domains (comma-separated)'),
            'instant_deploy': _bool('Deploy immediately after creation'),
            'destination_uuid': _str('Destination UUID (if server has multiple)'),
        },
        (*PLACEMENT_REQUIRED, 'git_repository', 'git_branch', 'build_pack', 'ports_exposes'),
    ),
    _tool(
        'coolify_create_application_private_github',
        'Create an application from a private GitHub repository using GitHub App',
        create('/applications/private-github-app'),
        {
            **_placement(),
            'github_app_uuid': _str('GitHub App UUID'),
            'git_repository': _str('Git repository URL'),
            'git_branch': _str('Git branch'),
            'build_pack': _str('Build pack to use'),
            'ports_exposes': _str('Ports to expose'),
            'name': _str('Application name'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        (*PLACEMENT_REQUIRED, 'github_app_uuid', 'git_repository', 'git_branch', 'build_pack', 'ports_exposes'),
    ),
    _tool(
        'coolify_create_application_private_deploy_key',
        'Create an application from a private repository using SSH deploy key',
        create('/applications/private-deploy-key'),
        {
            **_placement(),
            'private_key_uuid': _str('SSH private key UUID'),
            'git_repository': _str('Git repository URL (SSH format)'),
            'git_branch': _str('Git branch'),
            'build_pack': _str('Build pack to use'),
            'ports_exposes': _str('Ports to expose'),
            'name': _str('Application name'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        (*PLACEMENT_REQUIRED, 'private_key_uuid', 'git_repository', 'git_branch', 'build_pack', 'ports_exposes'),
    ),
    _tool(
        'coolify_create_application_dockerfile',
        'Create an application from a Dockerfile',
        create('/applications/dockerfile'),
        {
            **_placement(),
            'git_repository': _str('Git repository URL'),
            'git_branch': _str('Git branch'),
            'dockerfile': _str('Dockerfile content (base64 encoded)'),
            'ports_exposes': _str('Ports to expose'),
            'name': _str('Application name'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        (*PLACEMENT_REQUIRED, 'ports_exposes'),
    ),
    _tool(
        'coolify_create_application_docker_image',
        'Create an application from a Docker image',
        create('/applications/dockerimage'),
        {
            **_placement(),
            'docker_registry_image_name': _str('Docker image name (e.g., nginx:alpine)'),
            'docker_registry_image_tag': _str('Image tag (default: latest)'),
            'ports_exposes': _str('Ports to expose'),
            'name': _str('Application name'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        (*PLACEMENT_REQUIRED, 'docker_registry_image_name', 'ports_exposes'),
    ),
    _tool(
        'coolify_create_application_docker_compose',
        'Create an application from Docker Compose',
        create('/applications/dockercompose'),
        {
            **_placement(),
            'docker_compose_raw': _str('Docker Compose content (base64 encoded)'),
            'name': _str('Application name'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        (*PLACEMENT_REQUIRED, 'docker_compose_raw'),
    ),
    _tool(
        'coolify_update_application',
        'Update an existing application',
        update('/applications/{uuid}'),
        {
            'uuid': _str('Application UUID'),
            'name': _str('Application name'),
            'description': _str('Application description'),
            'domains': _str('Custom domains'),
            'git_repository': _str('Git repository URL'),
            'git_branch': _str('Git branch'),
            'git_commit_sha': _str('Specific commit SHA'),
            'build_pack': _str('Build pack'),
            'ports_exposes': _str('Exposed ports'),
            'ports_mappings': _str('Port mappings'),
            'install_command': _str('Install command'),
            'build_command': _str('Build command'),
            'start_command': _str('Start command'),
            'base_directory': _str('Base directory'),
            'publish_directory': _str('Publish directory'),
            'health_check_enabled': _bool('Enable health checks'),
            'health_check_path': _str('Health check path'),
            'health_check_interval': _num('Health check interval (seconds)'),
            'limits_memory': _str('Memory limit (e.g., 512m)'),
            'limits_cpus': _str('CPU limit'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_delete_application',
        'Delete an application',
        delete('/applications/{uuid}', *DELETE_FLAGS),
        {
            'uuid': _str('Application UUID'),
            'delete_configurations': _bool('Delete configuration files'),
            'delete_volumes': _bool('Delete associated volumes'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_start_application',
        'Start/deploy an application',
        action('/applications/{uuid}/start', QueryParam('force', flag=True), QueryParam('commit')),
        {
            'uuid': _str('Application UUID'),
            'force': _bool('Force rebuild without cache'),
            'commit': _str('Specific commit SHA to deploy'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_stop_application',
        'Stop an application',
        action('/applications/{uuid}/stop'),
        _uuid_only('Application'),
        ('uuid',),
    ),
    _tool(
        'coolify_restart_application',
        'Restart an application',
        action('/applications/{uuid}/restart'),
        _uuid_only('Application'),
        ('uuid',),
    ),
    _tool(
        'coolify_get_application_logs',
        'Get application logs',
        get('/applications/{uuid}/logs', QueryParam('tail'), QueryParam('since')),
        {
            'uuid': _str('Application UUID'),
            'tail': _num('Number of lines to retrieve (default: 1000)'),
            'since': _str('Show logs since timestamp (ISO 8601)'),
        },
        ('uuid',),
    ),
)

# ------------------------------------------------------------------------------
# Application Environment Variables
# ------------------------------------------------------------------------------

_APPLICATION_ENVS = (
    _tool(
        'coolify_list_application_envs',
        'List environment variables for an application',
        get('/applications/{uuid}/envs'),
        _uuid_only('Application'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_application_env',
        'Create an environment variable for an application',
        create('/applications/{uuid}/envs'),
        {
            'uuid': _str('Application UUID'),
            'key': _str('Variable name'),
            'value': _str('Variable value'),
            'is_buildtime': _bool('Available during build'),
            'is_runtime': _bool('Available at runtime'),
            'is_preview': _bool('Apply to preview deployments'),
        },
        ('uuid', 'key', 'value'),
    ),
    _tool(
        'coolify_update_application_env',
        'Update an environment variable',
        update('/applications/{uuid}/envs', renames=ENV_RENAME),
        {
            'uuid': _str('Application UUID'),
            'env_uuid': _str('Environment variable UUID'),
            'key': _str('Variable name'),
            'value': _str('Variable value'),
            'is_buildtime': _bool('Available during build'),
            'is_runtime': _bool('Available at runtime'),
            'is_preview': _bool('Apply to preview deployments'),
        },
        ('uuid', 'env_uuid'),
    ),
    _tool(
        'coolify_delete_application_env',
        'Delete an environment variable',
        delete('/applications/{uuid}/envs/{env_uuid}'),
        {'uuid': _str('Application UUID'), 'env_uuid': _str('Environment variable UUID')},
        ('uuid', 'env_uuid'),
    ),
    _tool(
        'coolify_bulk_update_application_envs',
        'Bulk create/update environment variables for an application',
        Route(
            HttpMethod.PATCH,
            '/applications/{uuid}/envs/bulk',
            body=BodyRule.ENVELOPE,
            envelope=('data', 'variables'),
        ),
        {
            'uuid': _str('Application UUID'),
            'variables': {
                'type': 'array',
                'description': 'Array of environment variables',
                'items': {
                    'type': 'object',
                    'properties': {
                        'key': {'type': 'string'},
                        'value': {'type': 'string'},
                        'is_buildtime': {'type': 'boolean'},
                        'is_runtime': {'type': 'boolean'},
                        'is_preview': {'type': 'boolean'},
                    },
                    'required': ['key', 'value'],
                },
            },
        },
        ('uuid', 'variables'),
    ),
)

# ------------------------------------------------------------------------------
# Databases
# ------------------------------------------------------------------------------


def _database(engine: str, description: str, **fields: dict[str, Any]) -> RegisteredTool:
    return _tool(
        f'coolify_create_database_{engine}',
        description,
        create(f'/databases/{engine}'),
        {
            **_placement(),
            'name': _str('Database name'),
            **fields,
            'public_port': _num('Public port'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        PLACEMENT_REQUIRED,
    )


_DATABASES = (
    _tool('coolify_list_databases', 'List all databases', get('/databases')),
    _tool(
        'coolify_get_database',
        'Get a specific database by UUID',
        get('/databases/{uuid}'),
        _uuid_only('Database'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_database_postgresql',
        'Create a PostgreSQL database',
        create('/databases/postgresql'),
        {
            **_placement(),
            'name': _str('Database name'),
            'description': _str('Description'),
            'image': _str('Docker image (default: postgres:16-alpine)'),
            'postgres_user': _str('PostgreSQL user'),
            'postgres_password': _str('PostgreSQL password'),
            'postgres_db': _str('Database name'),
            'public_port': _num('Public port to expose'),
            'instant_deploy': _bool('Deploy immediately'),
            'limits_memory': _str('Memory limit'),
        },
        PLACEMENT_REQUIRED,
    ),
    _database(
        'mysql',
        'Create a MySQL database',
        image=_str('Docker image (default: mysql:8.0)'),
        mysql_user=_str('MySQL user'),
        mysql_password=_str('MySQL password'),
        mysql_database=_str('Database name'),
        mysql_root_password=_str('Root password'),
    ),
    _database(
        'mariadb',
        'Create a MariaDB database',
        image=_str('Docker image (default: mariadb:11)'),
        mariadb_user=_str('MariaDB user'),
        mariadb_password=_str('MariaDB password'),
        mariadb_database=_str('Database name'),
        mariadb_root_password=_str('Root password'),
    ),
    _database(
        'mongodb',
        'Create a MongoDB database',
        image=_str('Docker image (default: mongo:7)'),
        mongo_initdb_root_username=_str('Root username'),
        mongo_initdb_root_password=_str('Root password'),
        mongo_initdb_database=_str('Initial database'),
    ),
    _database(
        'redis',
        'Create a Redis database',
        image=_str('Docker image (default: redis:7-alpine)'),
        redis_password=_str('Redis password'),
        redis_conf=_str('Custom redis.conf content'),
    ),
    _database(
        'clickhouse',
        'Create a ClickHouse database',
        image=_str('Docker image'),
        clickhouse_admin_user=_str('Admin username'),
        clickhouse_admin_password=_str('Admin password'),
    ),
    _database(
        'dragonfly',
        'Create a DragonFly database (Redis-compatible)',
        image=_str('Docker image'),
        dragonfly_password=_str('Password'),
    ),
    _database(
        'keydb',
        'Create a KeyDB database (Redis-compatible)',
        image=_str('Docker image'),
        keydb_password=_str('Password'),
        keydb_conf=_str('Custom keydb.conf content'),
    ),
    _tool(
        'coolify_update_database',
        'Update a database configuration',
        update('/databases/{uuid}'),
        {
            'uuid': _str('Database UUID'),
            'name': _str('Database name'),
            'description': _str('Description'),
            'image': _str('Docker image'),
            'public_port': _num('Public port'),
            'limits_memory': _str('Memory limit'),
            'limits_cpus': _str('CPU limit'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_delete_database',
        'Delete a database',
        delete('/databases/{uuid}', *DELETE_FLAGS),
        {
            'uuid': _str('Database UUID'),
            'delete_configurations': _bool('Delete configuration files'),
            'delete_volumes': _bool('Delete associated volumes'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_start_database',
        'Start a database',
        action('/databases/{uuid}/start'),
        _uuid_only('Database'),
        ('uuid',),
    ),
    _tool(
        'coolify_stop_database',
        'Stop a database',
        action('/databases/{uuid}/stop'),
        _uuid_only('Database'),
        ('uuid',),
    ),
    _tool(
        'coolify_restart_database',
        'Restart a database',
        action('/databases/{uuid}/restart'),
        _uuid_only('Database'),
        ('uuid',),
    ),
)

# ------------------------------------------------------------------------------
# Services & Service Environment Variables
# ------------------------------------------------------------------------------

_SERVICES = (
    _tool('coolify_list_services', 'List all services', get('/services')),
    _tool(
        'coolify_get_service',
        'Get a specific service by UUID',
        get('/services/{uuid}'),
        _uuid_only('Service'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_service',
        'Create a new service (from template or docker-compose)',
        create('/services'),
        {
            **_placement(),
            'type': _str("Service type/template name (e.g., 'plausible', 'supabase')"),
            'name': _str('Service name'),
            'description': _str('Service description'),
            'docker_compose_raw': _str('Custom docker-compose content (base64 encoded)'),
            'instant_deploy': _bool('Deploy immediately'),
        },
        PLACEMENT_REQUIRED,
    ),
    _tool(
        'coolify_update_service',
        'Update a service',
        update('/services/{uuid}'),
        {
            'uuid': _str('Service UUID'),
            'name': _str('Service name'),
            'description': _str('Description'),
            'docker_compose_raw': _str('Docker compose content (base64)'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_delete_service',
        'Delete a service',
        delete('/services/{uuid}', *DELETE_FLAGS),
        {
            'uuid': _str('Service UUID'),
            'delete_configurations': _bool('Delete configuration files'),
            'delete_volumes': _bool('Delete associated volumes'),
        },
        ('uuid',),
    ),
    _tool('coolify_start_service', 'Start a service', action('/services/{uuid}/start'), _uuid_only('Service'), ('uuid',)),
    _tool('coolify_stop_service', 'Stop a service', action('/services/{uuid}/stop'), _uuid_only('Service'), ('uuid',)),
    _tool(
        'coolify_restart_service',
        'Restart a service',
        action('/services/{uuid}/restart'),
        _uuid_only('Service'),
        ('uuid',),
    ),
    _tool(
        'coolify_list_service_envs',
        'List environment variables for a service',
        get('/services/{uuid}/envs'),
        _uuid_only('Service'),
        ('uuid',),
    ),
    _tool(
        'coolify_create_service_env',
        'Create an environment variable for a service',
        create('/services/{uuid}/envs'),
        {'uuid': _str('Service UUID'), 'key': _str('Variable name'), 'value': _str('Variable value')},
        ('uuid', 'key', 'value'),
    ),
    _tool(
        'coolify_update_service_env',
        'Update a service environment variable',
        update('/services/{uuid}/envs', renames=ENV_RENAME),
        {
            'uuid': _str('Service UUID'),
            'env_uuid': _str('Environment variable UUID'),
            'key': _str('Variable name'),
            'value': _str('Variable value'),
        },
        ('uuid', 'env_uuid'),
    ),
    _tool(
        'coolify_delete_service_env',
        'Delete a service environment variable',
        delete('/services/{uuid}/envs/{env_uuid}'),
        {'uuid': _str('Service UUID'), 'env_uuid': _str('Environment variable UUID')},
        ('uuid', 'env_uuid'),
    ),
)

# ------------------------------------------------------------------------------
# Deployments & Resources
# ------------------------------------------------------------------------------

_DEPLOYMENTS = (
    _tool(
        'coolify_deploy',
        'Deploy resources by UUID or tag',
        get(
            '/deploy',
            QueryParam('uuid'),
            QueryParam('tag'),
            QueryParam('force', flag=True),
            QueryParam('pr'),
        ),
        {
            'uuid': _str('Resource UUID(s), comma-separated'),
            'tag': _str('Tag name(s), comma-separated'),
            'force': _bool('Force rebuild without cache'),
            'pr': _num('Pull request ID for preview deployment'),
        },
    ),
    _tool(
        'coolify_list_deployments',
        'List deployments for an application',
        get('/applications/{uuid}/deployments', QueryParam('skip'), QueryParam('take')),
        {
            'uuid': _str('Application UUID'),
            'skip': _num('Number of records to skip'),
            'take': _num('Number of records to take'),
        },
        ('uuid',),
    ),
    _tool(
        'coolify_get_deployment',
        'Get a specific deployment by UUID',
        get('/deployments/{uuid}'),
        _uuid_only('Deployment'),
        ('uuid',),
    ),
    _tool(
        'coolify_list_resources',
        'List all resources (applications, databases, services)',
        get('/resources'),
    ),
)


TOOL_REGISTRY: tuple[RegisteredTool, ...] = (
    *_SYSTEM,
    *_PROJECTS,
    *_SERVERS,
    *_SOURCES,
    *_APPLICATIONS,
    *_APPLICATION_ENVS,
    *_DATABASES,
    *_SERVICES,
    *_DEPLOYMENTS,
)

TOOLS_BY_NAME: dict[str, RegisteredTool] = {tool.name: tool for tool in TOOL_REGISTRY}
