# apps/storefront/queries.py
# GraphQL documents for the Storefront customer API.

ADDRESS_NODE_FIELDS = """
    id
    firstName
    lastName
    company
    address1
    address2
    city
    province
    zip
    country
    phone
    formatted
"""

CUSTOMER_ADDRESSES_QUERY = (
    """
query CustomerAddresses($customerAccessToken: String!, $first: Int!) {
  customer(customerAccessToken: $customerAccessToken) {
    defaultAddress {
      id
    }
    addresses(first: $first) {
      edges {
        node {"""
    + ADDRESS_NODE_FIELDS
    + """        }
      }
    }
  }
}
"""
)

CUSTOMER_ADDRESS_CREATE_MUTATION = """
mutation customerAddressCreate($address: MailingAddressInput!, $customerAccessToken: String!) {
  customerAddressCreate(address: $address, customerAccessToken: $customerAccessToken) {
    customerAddress {
      id
    }
    customerUserErrors {
      code
      field
      message
    }
  }
}
"""

CUSTOMER_ADDRESS_UPDATE_MUTATION = """
mutation customerAddressUpdate(
  $address: MailingAddressInput!
  $customerAccessToken: String!
  $id: ID!
) {
  customerAddressUpdate(address: $address, customerAccessToken: $customerAccessToken, id: $id) {
    customerUserErrors {
      code
      field
      message
    }
  }
}
"""

CUSTOMER_ADDRESS_DELETE_MUTATION = """
mutation customerAddressDelete($customerAccessToken: String!, $id: ID!) {
  customerAddressDelete(customerAccessToken: $customerAccessToken, id: $id) {
    customerUserErrors {
      code
      field
      message
    }
    deletedCustomerAddressId
  }
}
"""

CUSTOMER_DEFAULT_ADDRESS_UPDATE_MUTATION = """
mutation customerDefaultAddressUpdate($addressId: ID!, $customerAccessToken: String!) {
  customerDefaultAddressUpdate(addressId: $addressId, customerAccessToken: $customerAccessToken) {
    customerUserErrors {
      code
      field
      message
    }
  }
}
"""

CUSTOMER_ACCESS_TOKEN_CREATE_MUTATION = """
mutation customerAccessTokenCreate($input: CustomerAccessTokenCreateInput!) {
  customerAccessTokenCreate(input: $input) {
    customerUserErrors {
      code
      field
      message
    }
    customerAccessToken {
      accessToken
      expiresAt
    }
  }
}
"""

CUSTOMER_ACCESS_TOKEN_DELETE_MUTATION = """
mutation customerAccessTokenDelete($customerAccessToken: String!) {
  customerAccessTokenDelete(customerAccessToken: $customerAccessToken) {
    deletedAccessToken
    userErrors {
      field
      message
    }
  }
}
"""
