"""
Tests for EnrichmentClient: call order, failures per stage and the shared deadline.
"""
from unittest.mock import Mock

import requests
from django.test import SimpleTestCase

from people.dtos import ReceivedPersonDTO
from people.exceptions import EnrichmentError
from people.services.enrichment_client import EnrichmentClient

AGIFY = 'https://agify.test'
GENDERIZE = 'https://genderize.test'
NATIONALIZE = 'https://nationalize.test'


def make_response(payload=None, status_error=None, json_error=None):
    response = Mock()
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


class EnrichmentClientTest(SimpleTestCase):
    """Test EnrichmentClient against a mocked requests session"""

    def setUp(self):
        self.session = Mock()
        self.received = ReceivedPersonDTO(name='Dmitriy', surname='Ushakov', patronymic='Vasilevich')

    def make_client(self, clock=None, timeout=3.0):
        return EnrichmentClient(
            agify_url=AGIFY,
            genderize_url=GENDERIZE,
            nationalize_url=NATIONALIZE,
            timeout=timeout,
            session=self.session,
            clock=clock,
        )

    def ok_responses(self):
        return [
            make_response({'count': 10, 'name': 'Dmitriy', 'age': 42}),
            make_response({'count': 10, 'name': 'Dmitriy', 'gender': 'male', 'probability': 1.0}),
            make_response({'count': 10, 'name': 'Dmitriy', 'country': [
                {'country_id': 'UA', 'probability': 0.4},
                {'country_id': 'RU', 'probability': 0.3},
            ]}),
        ]

    def test_enrich_merges_all_three_lookups(self):
        """The received fields are kept and the guesses are filled in"""
        self.session.get.side_effect = self.ok_responses()

        person = self.make_client().enrich(self.received)

        self.assertEqual(person.name, 'Dmitriy')
        self.assertEqual(person.surname, 'Ushakov')
        self.assertEqual(person.patronymic, 'Vasilevich')
        self.assertEqual(person.age, 42)
        self.assertEqual(person.gender, 'male')
        self.assertEqual(person.nationality, 'UA')
        self.assertIsNone(person.id)

    def test_calls_run_in_order_with_name_query(self):
        """age -> gender -> nationality, each with ?name=<name>"""
        self.session.get.side_effect = self.ok_responses()

        self.make_client().enrich(self.received)

        urls = [call.args[0] for call in self.session.get.call_args_list]
        self.assertEqual(urls, [AGIFY, GENDERIZE, NATIONALIZE])
        for call in self.session.get.call_args_list:
            self.assertEqual(call.kwargs['params'], {'name': 'Dmitriy'})

    def test_transport_error_aborts_at_first_stage(self):
        """A failing age call stops the chain"""
        self.session.get.side_effect = requests.ConnectionError('connection refused')

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client().enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'age')
        self.assertIn('failed to get age', str(ctx.exception))
        self.assertEqual(self.session.get.call_count, 1)

    def test_timeout_is_reported(self):
        self.session.get.side_effect = requests.Timeout('read timed out')

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client().enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'age')
        self.assertIn('timed out', str(ctx.exception))

    def test_undecodable_gender_body(self):
        responses = self.ok_responses()
        responses[1] = make_response(json_error=ValueError('Expecting value'))
        self.session.get.side_effect = responses

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client().enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'gender')
        self.assertEqual(self.session.get.call_count, 2)

    def test_http_error_status_fails_stage(self):
        responses = self.ok_responses()
        responses[0] = make_response(
            {'error': 'Request limit reached'},
            status_error=requests.HTTPError('429 Client Error'),
        )
        self.session.get.side_effect = responses

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client().enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'age')

    def test_unknown_name_age_is_rejected(self):
        """agify answers age=null for names it does not know"""
        responses = self.ok_responses()
        responses[0] = make_response({'count': 0, 'name': 'Zzz', 'age': None})
        self.session.get.side_effect = responses

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client().enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'age')

    def test_empty_nationality_candidates(self):
        responses = self.ok_responses()
        responses[2] = make_response({'count': 0, 'name': 'Dmitriy', 'country': []})
        self.session.get.side_effect = responses

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client().enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'nationality')
        self.assertIn('no nationality found', str(ctx.exception))

    def test_deadline_is_shared_between_calls(self):
        """Each call only gets what the previous ones left of the budget"""
        self.session.get.side_effect = self.ok_responses()
        # start, before age, before gender, before nationality
        clock = Mock(side_effect=[100.0, 100.0, 102.0, 102.5])

        self.make_client(clock=clock).enrich(self.received)

        timeouts = [call.kwargs['timeout'] for call in self.session.get.call_args_list]
        self.assertEqual(timeouts, [3.0, 1.0, 0.5])

    def test_exhausted_deadline_fails_without_calling(self):
        self.session.get.side_effect = self.ok_responses()
        clock = Mock(side_effect=[0.0, 0.0, 2.0, 3.5])

        with self.assertRaises(EnrichmentError) as ctx:
            self.make_client(clock=clock).enrich(self.received)

        self.assertEqual(ctx.exception.stage, 'nationality')
        self.assertIn('deadline exceeded', str(ctx.exception))
        self.assertEqual(self.session.get.call_count, 2)
