from typing import Dict, Iterable

from botocore.exceptions import ClientError

from .base import BaseDAO, Filters
from ..aws_errors import error_code, to_arnav_error
from ..models import Resource


class S3BucketDAO(BaseDAO):
    service = "s3"
    resource_type = "buckets"
    pretty_name = "S3 Bucket"

    def _bucket_arn(self, bucket: Dict) -> str:
        # list_buckets recente já devolve BucketArn; senão monta arn:aws:s3:::bucket-name
        return bucket.get("BucketArn") or f"arn:aws:s3:::{bucket['Name']}"

    def _get_tags(self, bucket_name: str) -> Dict[str, str]:
        """
        Tags atuais do bucket em dict[str, str]. Bucket sem TagSet devolve {}.
        """
        try:
            response = self.client.get_bucket_tagging(Bucket=bucket_name)
        except ClientError as e:
            if error_code(e) == "NoSuchTagSet":
                return {}
            raise to_arnav_error(e, self._label(bucket_name)) from e
        return Resource.tags_from_list(response.get("TagSet", []))

    def list_resources(self, filters: Filters = None) -> Iterable[Resource]:
        resp = self._call("", "list_buckets")
        for b in resp.get("Buckets", []):
            yield Resource(id=b["Name"], name=b["Name"], arn=self._bucket_arn(b), data=b)

    def get(self, resource_id: str, filters: Filters = None) -> Resource:
        # arn:aws:s3:::bucket-name -> resource_id já é o nome do bucket
        self._call(resource_id, "head_bucket", Bucket=resource_id)
        location = self._call(resource_id, "get_bucket_location", Bucket=resource_id)

        # us-east-1 vem como LocationConstraint vazio
        region = location.get("LocationConstraint") or "us-east-1"

        return Resource(
            id=resource_id,
            name=resource_id,
            arn=f"arn:aws:s3:::{resource_id}",
            tags=self._get_tags(resource_id),
            data={"Name": resource_id, "Region": region},
        )
