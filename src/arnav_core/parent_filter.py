from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Optional, Tuple

if TYPE_CHECKING:
    from .arn import Arn


NO_FILTER: Tuple[str, str] = ("", "")

ParentFilterRule = Callable[["Arn"], Tuple[str, str]]


def _before(marker: str, key: str) -> ParentFilterRule:
    """
    Valor = trecho do resource_id antes do marcador. Sem marcador, sem filtro.
    """

    def rule(arn: Arn) -> Tuple[str, str]:
        idx = arn.resource_id.find(marker)
        if idx == -1:
            return NO_FILTER
        return key, arn.resource_id[:idx]

    return rule


def _head(key: str) -> ParentFilterRule:
    """
    Valor = primeiro segmento do resource_id ("job/run/123" -> "job"),
    ou o id inteiro quando não há '/'.
    """

    def rule(arn: Arn) -> Tuple[str, str]:
        return key, arn.resource_id.split("/", 1)[0]

    return rule


def _parent_arn(key: str, marker: str, type_segment: str) -> ParentFilterRule:
    """
    Reconstrói o ARN completo do pai, para APIs que endereçam o pai pelo ARN:
    arn:{partition}:{service}:{region}:{account}:{type_segment}{id antes do marcador}
    """

    def rule(arn: Arn) -> Tuple[str, str]:
        idx = arn.resource_id.find(marker)
        if idx == -1:
            return NO_FILTER
        parent = (
            f"arn:{arn.partition}:{arn.service}:{arn.region}:{arn.account_id}:"
            f"{type_segment}{arn.resource_id[:idx]}"
        )
        return key, parent

    return rule


def _none(arn: Arn) -> Tuple[str, str]:
    return NO_FILTER


PARENT_FILTER_RULES = MappingProxyType(
    {
        # detector/<detector-id>/finding/<finding-id>
        "guardduty/detector": _before("/finding/", "DetectorId"),
        # table/<database>/<table>
        "glue/table": _before("/", "DatabaseName"),
        # job/<job> ou job/<job>/run/<run-id>
        "glue/job": _head("JobName"),
        # user/<server-id>/<user>
        "transfer/user": _before("/", "ServerId"),
        # build/<project>:<build-id>
        "codebuild/build": _before(":", "ProjectName"),
        "codepipeline/pipeline": _head("PipelineName"),
        # cluster/<cluster-id>/step/<step-id>
        "elasticmapreduce/cluster": _head("ClusterId"),
        # repository/<repo>/image/sha256:...
        "ecr/repository": _head("RepositoryName"),
        # userpool/<pool-id>/user/<username>
        "cognito-idp/userpool": _head("UserPoolId"),
        # analyzer/<name>/finding/<finding-id>
        "access-analyzer/analyzer": _parent_arn("AnalyzerArn", "/finding/", "analyzer/"),
        # graph:<graph-id>/investigation/<inv-id>
        "detective/graph": _parent_arn("GraphArn", "/investigation/", "graph:"),
        # o vault não aparece no ARN de recovery point
        "backup/recovery-point": _none,
        # backup-plan/<plan-id>/selection/<selection-id>
        "backup/backup-plan": _head("BackupPlanId"),
    }
)


def parent_filter_for(service: str, resource_type: str) -> Optional[ParentFilterRule]:
    return PARENT_FILTER_RULES.get(f"{service}/{resource_type}")
