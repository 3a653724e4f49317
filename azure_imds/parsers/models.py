# Copyright 2021 The Azure IMDS Client Authors. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


from typing import Dict, Tuple

import jmespath
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from .tags import parse_tags


class ImdsModel(BaseModel):
    ''' Base for every record in the IMDS response '''

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        # IMDS sometimes sends null for unset values, treat them as absent
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Plan(ImdsModel):
    name: str = ''
    product: str = ''
    publisher: str = ''


class PublicKey(ImdsModel):
    key_data: str = ''
    path: str = ''


class ImageReference(ImdsModel):
    id: str = ''
    offer: str = ''
    publisher: str = ''
    sku: str = ''
    version: str = ''


class DiffDiskSettings(ImdsModel):
    option: str = ''


class EncryptionSettings(ImdsModel):
    enabled: str = ''


class DiskUri(ImdsModel):
    uri: str = ''


class ManagedDisk(ImdsModel):
    id: str = ''
    storage_account_type: str = ''


class OsDisk(ImdsModel):
    caching: str = ''
    create_option: str = ''
    diff_disk_settings: DiffDiskSettings = DiffDiskSettings()
    disk_size_gb: str = Field('', alias='diskSizeGB')
    encryption_settings: EncryptionSettings = EncryptionSettings()
    image: DiskUri = DiskUri()
    managed_disk: ManagedDisk = ManagedDisk()
    name: str = ''
    os_type: str = ''
    vhd: DiskUri = DiskUri()
    write_accelerator_enabled: str = ''


class DataDisk(ImdsModel):
    caching: str = ''
    create_option: str = ''
    disk_size_gb: str = Field('', alias='diskSizeGB')
    image: DiskUri = DiskUri()
    lun: str = ''
    managed_disk: ManagedDisk = ManagedDisk()
    name: str = ''
    vhd: DiskUri = DiskUri()
    write_accelerator_enabled: str = ''


# Only present from api-version 2019-06-01
class StorageProfile(ImdsModel):
    image_reference: ImageReference = ImageReference()
    os_disk: OsDisk = OsDisk()
    data_disks: Tuple[DataDisk, ...] = ()


class Compute(ImdsModel):
    az_environment: str = ''
    custom_data: str = ''
    location: str = ''
    name: str = ''
    offer: str = ''
    os_type: str = ''
    placement_group_id: str = ''
    plan: Plan = Plan()
    platform_fault_domain: str = ''
    platform_update_domain: str = ''
    provider: str = ''
    public_keys: Tuple[PublicKey, ...] = ()
    publisher: str = ''
    resource_group_name: str = ''
    resource_id: str = ''
    sku: str = ''
    storage_profile: StorageProfile = StorageProfile()
    subscription_id: str = ''
    tags: str = ''
    version: str = ''
    vm_id: str = ''
    vm_scale_set_name: str = ''
    vm_size: str = ''
    zone: str = ''


class IPAddress(ImdsModel):
    private_ip_address: str = ''
    public_ip_address: str = ''


class Subnet(ImdsModel):
    address: str = ''
    prefix: str = ''


class IPv4(ImdsModel):
    ip_address: Tuple[IPAddress, ...] = ()
    subnet: Tuple[Subnet, ...] = ()


class IPv6(ImdsModel):
    ip_address: Tuple[IPAddress, ...] = ()


class Interface(ImdsModel):
    ipv4: IPv4 = IPv4()
    ipv6: IPv6 = IPv6()
    mac_address: str = ''


class Network(ImdsModel):
    interface: Tuple[Interface, ...] = ()


class Metadata(ImdsModel):
    ''' The instance document returned by /metadata/instance

    parsed_tags is derived from compute.tags and is never read from input.
    '''

    compute: Compute = Compute()
    network: Network = Network()

    @computed_field(alias='parsedTags')
    @property
    def parsed_tags(self) -> Dict[str, str]:
        return parse_tags(self.compute.tags)

    def to_dict(self):
        ''' The document in its wire form, camelCase keys and parsedTags included '''
        return self.model_dump(mode='json', by_alias=True)

    def search(self, expression):
        ''' Evaluate a JMESPath expression against the wire form of the document '''
        return jmespath.search(expression, self.to_dict())
