"""
API Tests for SOR role endpoints.
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status

from core.base.test_utils import (
    setup_reference_data, create_person, create_sor_person, create_role_info,
    create_country_with_region, role_payload
)
from registry.sor.models import SorRole

ROLES_URL = '/sor/HR/people/E1001/roles/'
ROLE_URL = '/sor/HR/people/E1001/roles/R1/'

XML_PAYLOAD = """<?xml version="1.0" encoding="utf-8"?>
<root>
    <role_id>RX</role_id>
    <role_code>STAFF</role_code>
    <start_date>2024-01-01</start_date>
    <percentage>75</percentage>
    <sponsor_type>ORG_UNIT</sponsor_type>
    <sponsor_id>CS</sponsor_id>
    <emails>
        <list-item>
            <type>Work</type>
            <address>jdoe@example.edu</address>
        </list-item>
    </emails>
    <phones>
        <list-item>
            <type>Cell</type>
            <address_type>Home</address_type>
            <area_code>732</area_code>
            <number>5551234</number>
        </list-item>
    </phones>
    <addresses></addresses>
</root>
"""


class RoleAPITest(TestCase):
    """Test /sor/<source>/people/<id>/roles/ endpoints"""

    @classmethod
    def setUpTestData(cls):
        setup_reference_data()
        create_role_info('STAFF', 'CS')
        create_country_with_region('US', 'NJ')
        cls.person = create_person(netid='jdoe')
        cls.sor_person = create_sor_person('HR', 'E1001', person=cls.person)

    def setUp(self):
        self.client = APIClient()

    def test_create_role(self):
        response = self.client.post(ROLES_URL, role_payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response['Location'], f'http://testserver{ROLE_URL}')
        body = response.json()
        self.assertEqual(body['status'], 'success')
        data = body['data']
        self.assertEqual(data['role_id'], 'R1')
        self.assertEqual(data['role_code'], 'STAFF')
        self.assertEqual(data['status'], 'Active')
        self.assertEqual(data['percentage'], 50)
        self.assertEqual(data['sponsor']['type'], 'ORG_UNIT')
        self.assertEqual(data['emails'][0]['address'], 'jdoe@example.edu')
        self.assertEqual(data['addresses'][0]['region_code'], 'NJ')

    def test_contacts_round_trip(self):
        payload = role_payload(
            emails=[
                {'type': 'Work', 'address': 'a@example.edu'},
                {'type': 'Personal', 'address': 'b@example.com'},
                {'type': 'Campus', 'address': 'c@example.edu'},
            ],
            phones=[
                {'type': 'Cell', 'address_type': 'Home', 'number': '5550001'},
                {'type': 'Fax', 'address_type': 'Office', 'number': '5550002'},
            ],
            addresses=[
                {'type': 'Home', 'city': 'Edison', 'postal_code': '08817'},
            ],
        )
        self.client.post(ROLES_URL, payload, format='json')

        response = self.client.get(ROLE_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()['data']
        self.assertEqual(len(data['emails']), 3)
        self.assertEqual(len(data['phones']), 2)
        self.assertEqual(len(data['addresses']), 1)
        self.assertEqual(
            sorted(e['address'] for e in data['emails']),
            ['a@example.edu', 'b@example.com', 'c@example.edu']
        )

    def test_unknown_role_code(self):
        response = self.client.post(ROLES_URL, role_payload(role_code='NOPE'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body['status'], 'error')
        self.assertIn('The role identified by role code [NOPE] does not exist', body['message'])
        self.assertIn('role_code', body['data'])

    def test_unresolvable_org_unit_sponsor(self):
        response = self.client.post(ROLES_URL, role_payload(sponsor_id='NOPE'), format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['message'], 'The department identified by [NOPE] does not exist')

    def test_unknown_person(self):
        response = self.client.post('/sor/HR/people/E404/roles/', role_payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn('/sor/HR/people/E404', response.json()['message'])

    def test_end_date_before_start_date(self):
        payload = role_payload(start_date='2024-06-01', end_date='2024-01-01')

        response = self.client.post(ROLES_URL, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('end_date', response.json()['data'])
        self.assertEqual(SorRole.objects.count(), 0)

    def test_invalid_contact_is_reported_by_position(self):
        payload = role_payload(addresses=[
            {'type': 'Home', 'city': 'Edison', 'postal_code': '08817'},
            {'type': 'Home', 'city': '', 'postal_code': '08817'},
        ])

        response = self.client.post(ROLES_URL, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('addresses[1].city', response.json()['data'])

    def test_invalid_email_is_keyed_like_the_payload(self):
        payload = role_payload(emails=[{'type': 'Work', 'address': 'not-an-email'}])

        response = self.client.post(ROLES_URL, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        data = response.json()['data']
        self.assertIn('emails[0].address', data)
        self.assertNotIn('email_addresses[0].address', data)

    def test_unknown_email_type_is_keyed_like_the_payload(self):
        payload = role_payload(emails=[{'type': 'Pager', 'address': 'jdoe@example.edu'}])

        response = self.client.post(ROLES_URL, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('emails[0].type', response.json()['data'])

    def test_malformed_payload(self):
        response = self.client.post(ROLES_URL, {'role_code': 'STAFF'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        data = response.json()['data']
        self.assertIn('sponsor_type', data)
        self.assertIn('sponsor_id', data)

    def test_create_role_from_xml(self):
        response = self.client.post(ROLES_URL, data=XML_PAYLOAD, content_type='application/xml')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        role = SorRole.objects.get(sor_id='RX')
        self.assertEqual(role.percentage, 75)
        self.assertEqual(role.email_addresses.get().address, 'jdoe@example.edu')
        self.assertEqual(role.phones.get().area_code, '732')
        self.assertEqual(role.addresses.count(), 0)

    def test_update_replaces_contacts(self):
        self.client.post(ROLES_URL, role_payload(), format='json')

        payload = role_payload(
            percentage=25,
            emails=[],
            phones=[{'type': 'Cell', 'address_type': 'Home', 'number': '5559999'}],
        )
        response = self.client.put(ROLE_URL, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        data = self.client.get(ROLE_URL).json()['data']
        self.assertEqual(data['percentage'], 25)
        self.assertEqual(data['emails'], [])
        self.assertEqual([p['number'] for p in data['phones']], ['5559999'])
        self.assertEqual(len(data['addresses']), 1)

    def test_update_with_invalid_dates(self):
        self.client.post(ROLES_URL, role_payload(), format='json')

        response = self.client.put(ROLE_URL, role_payload(end_date='2023-01-01'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('end_date', response.json()['data'])

    def test_update_unknown_role(self):
        response = self.client.put('/sor/HR/people/E1001/roles/R404/', role_payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_roles(self):
        self.client.post(ROLES_URL, role_payload(), format='json')

        response = self.client.get(ROLES_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        results = response.json()['data']['results']
        self.assertEqual([r['role_id'] for r in results], ['R1'])

    def test_list_roles_active_on_a_date(self):
        self.client.post(ROLES_URL, role_payload(), format='json')
        self.client.post(
            ROLES_URL,
            role_payload(role_id='R2', start_date='2025-06-01', end_date=None),
            format='json'
        )

        response = self.client.get(ROLES_URL, {'active_on': '2024-06-01'})
        results = response.json()['data']['results']
        self.assertEqual([r['role_id'] for r in results], ['R1'])
        self.assertFalse(results[0]['is_active'])

        response = self.client.get(ROLES_URL, {'active_on': '2025-07-01'})
        results = response.json()['data']['results']
        self.assertEqual([r['role_id'] for r in results], ['R2'])
        self.assertTrue(results[0]['is_active'])

    def test_list_roles_with_invalid_date(self):
        response = self.client.get(ROLES_URL, {'active_on': 'June'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('active_on', response.json()['data'])

    def test_delete_role(self):
        self.client.post(ROLES_URL, role_payload(), format='json')

        response = self.client.delete(ROLE_URL)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.get(ROLE_URL).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.person.roles.count(), 0)
