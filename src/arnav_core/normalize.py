from types import MappingProxyType


# Tipos de ec2 que o arnav agrupa sob o serviço "vpc"
VPC_RESOURCE_TYPES = frozenset(
    {
        "vpc",
        "subnet",
        "route-table",
        "internet-gateway",
        "nat-gateway",
        "vpc-endpoint",
        "transit-gateway",
    }
)

# Nome do serviço no ARN -> nome do serviço no arnav
SERVICE_OVERRIDES = MappingProxyType(
    {
        "logs": "cloudwatch",
        "states": "stepfunctions",
        "elasticloadbalancing": "elbv2",
        "execute-api": "apigateway",
        "config": "configservice",
        "access-analyzer": "accessanalyzer",
    }
)

# Chave "<serviço do ARN>/<tipo do ARN>" -> tipo de recurso no arnav (plural, kebab-case)
RESOURCE_TYPE_OVERRIDES = MappingProxyType(
    {
        "ec2/instance": "instances",
        "ec2/volume": "volumes",
        "ec2/security-group": "security-groups",
        "ec2/elastic-ip": "elastic-ips",
        "ec2/key-pair": "key-pairs",
        "ec2/image": "images",
        "ec2/snapshot": "snapshots",
        "ec2/launch-template": "launch-templates",
        "ec2/capacity-reservation": "capacity-reservations",
        "ec2/vpc": "vpcs",
        "ec2/subnet": "subnets",
        "ec2/route-table": "route-tables",
        "ec2/internet-gateway": "internet-gateways",
        "ec2/nat-gateway": "nat-gateways",
        "ec2/vpc-endpoint": "endpoints",
        "ec2/transit-gateway": "transit-gateways",
        "lambda/function": "functions",
        "ecs/cluster": "clusters",
        "ecs/service": "services",
        "ecs/task": "tasks",
        "ecs/task-definition": "task-definitions",
        "ecs/container-instance": "container-instances",
        "s3/bucket": "buckets",
        "rds/db": "instances",
        "rds/cluster": "clusters",
        "rds/snapshot": "snapshots",
        "iam/user": "users",
        "iam/role": "roles",
        "iam/policy": "policies",
        "iam/group": "groups",
        "iam/instance-profile": "instance-profiles",
        "dynamodb/table": "tables",
        "sns/topic": "topics",
        "sqs/queue": "queues",
        "logs/log-group": "log-groups",
        "states/stateMachine": "state-machines",
        "states/execution": "executions",
        "secretsmanager/secret": "secrets",
        "kms/key": "keys",
        "events/event-bus": "buses",
        "events/rule": "rules",
        "apigateway/restapis": "rest-apis",
        "cloudformation/stack": "stacks",
        "autoscaling/autoScalingGroup": "groups",
        "elasticloadbalancing/loadbalancer": "load-balancers",
        "elasticloadbalancing/targetgroup": "target-groups",
        "elasticloadbalancing/app": "load-balancers",
        "elasticloadbalancing/net": "load-balancers",
        "ecr/repository": "repositories",
        "kinesis/stream": "streams",
        "glue/database": "databases",
        "glue/table": "tables",
        "glue/crawler": "crawlers",
        "glue/job": "jobs",
        "bedrock/foundation-model": "foundation-models",
        "bedrock/inference-profile": "inference-profiles",
        "bedrock/guardrail": "guardrails",
        "bedrock-agent/agent": "agents",
        "bedrock-agent/knowledge-base": "knowledge-bases",
        "bedrock-agent/flow": "flows",
        "bedrock-agentcore/runtime": "runtimes",
        "route53/hostedzone": "hosted-zones",
        "cloudfront/distribution": "distributions",
        "acm/certificate": "certificates",
        "ssm/parameter": "parameters",
        "cognito-idp/userpool": "user-pools",
        "guardduty/detector": "detectors",
        "config/config-rule": "rules",
        "backup/backup-vault": "vaults",
        "backup/backup-plan": "plans",
        "organizations/account": "accounts",
        "organizations/ou": "ous",
    }
)


def _key(service: str, resource_type: str) -> str:
    return f"{service}/{resource_type}"


def has_explicit_type(service: str, resource_type: str) -> bool:
    return _key(service, resource_type) in RESOURCE_TYPE_OVERRIDES


def normalize_service(service: str, resource_type: str) -> str:
    if service == "ec2" and resource_type in VPC_RESOURCE_TYPES:
        return "vpc"
    return SERVICE_OVERRIDES.get(service, service)


def pluralize(word: str) -> str:
    if not word:
        return ""
    if word.endswith("s"):
        return word
    if word.endswith("y"):
        return word[:-1] + "ies"
    return word + "s"


def normalize_resource_type(service: str, resource_type: str) -> str:
    """
    Tabela explícita primeiro; sem entrada, cai na pluralização simples
    (widget -> widgets, policy -> policies, things -> things).
    """
    mapped = RESOURCE_TYPE_OVERRIDES.get(_key(service, resource_type))
    if mapped is not None:
        return mapped
    return pluralize(resource_type)
