"""
API Tests for reference data listings.
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status

from core.base.test_utils import setup_reference_data, create_country_with_region, create_role_info


class ReferenceAPITest(TestCase):
    """Test reference listing endpoints"""

    @classmethod
    def setUpTestData(cls):
        setup_reference_data()
        create_country_with_region('US', 'NJ')
        create_role_info('STAFF', 'CS')

    def setUp(self):
        self.client = APIClient()

    def test_list_types_by_data_type(self):
        response = self.client.get('/reference/types/', {'data_type': 'PHONE'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['status'], 'success')
        descriptions = [t['description'] for t in body['data']['results']]
        self.assertEqual(sorted(descriptions), ['Cell', 'Fax', 'Landline'])

    def test_unknown_data_type_is_rejected(self):
        response = self.client.get('/reference/types/', {'data_type': 'BOAT'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('BOAT', response.json()['message'])

    def test_list_countries_with_regions(self):
        response = self.client.get('/reference/countries/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        results = response.json()['data']['results']
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0]['code'], 'US')
        self.assertEqual(results[0]['regions'][0]['code'], 'NJ')

    def test_list_roles(self):
        response = self.client.get('/reference/roles/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        codes = [r['code'] for r in response.json()['data']['results']]
        self.assertEqual(codes, ['STAFF'])
