"""Documentation section templates (Fumadocs)"""

import json

SOURCE_CONFIG = """import { defineDocs } from 'fumadocs-mdx/config';

export const { docs, meta } = defineDocs({
  dir: 'content/docs',
});
"""

DOCS_SOURCE = """import { loader } from 'fumadocs-core/source';
import { createMDXSource } from 'fumadocs-mdx/runtime/next';
import { docs, meta } from '@/.source';
import { icons } from 'lucide-react';
import { createElement } from 'react';

export const source = loader({
  baseUrl: '/docs',
  source: createMDXSource(docs, meta),
  icon(icon) {
    if (icon && icon in icons)
      return createElement(icons[icon as keyof typeof icons]);
  },
});
"""

# Has its own <html>/<body> so it does not inherit the main site layout
DOCS_LAYOUT = """import '../globals.css';
import { RootProvider } from 'fumadocs-ui/provider';
import { DocsLayout } from 'fumadocs-ui/layouts/docs';
import type { ReactNode } from 'react';
import { source } from '@/lib/source';

export default function Layout({ children }: { children: ReactNode }) {
  return (
    <html lang="en" suppressHydrationWarning>
      <body>
        <RootProvider>
          <DocsLayout
            tree={source.pageTree}
            nav={{
              title: process.env.NEXT_PUBLIC_APP_NAME || 'Documentation',
            }}
            sidebar={{
              defaultOpenLevel: 0,
            }}
          >
            {children}
          </DocsLayout>
        </RootProvider>
      </body>
    </html>
  );
}
"""

DOCS_PAGE = """import { source } from '@/lib/source';
import {
  DocsPage,
  DocsBody,
  DocsDescription,
  DocsTitle,
} from 'fumadocs-ui/page';
import { notFound } from 'next/navigation';
import defaultMdxComponents from 'fumadocs-ui/mdx';

export default async function Page({
  params,
}: {
  params: Promise<{ slug?: string[] }>;
}) {
  const { slug } = await params;
  const page = source.getPage(slug);
  if (!page) notFound();

  const MDX = page.data.body;

  return (
    <DocsPage
      toc={page.data.toc}
      full={page.data.full}
      tableOfContent={{
        style: 'clerk',
      }}
    >
      <DocsTitle>{page.data.title}</DocsTitle>
      <DocsDescription>{page.data.description}</DocsDescription>
      <DocsBody>
        <MDX components={{ ...defaultMdxComponents }} />
      </DocsBody>
    </DocsPage>
  );
}

export async function generateStaticParams() {
  return source.generateParams();
}

export async function generateMetadata({ params }: { params: Promise<{ slug?: string[] }> }) {
  const { slug } = await params;
  const page = source.getPage(slug);
  if (!page) notFound();

  return {
    title: page.data.title,
    description: page.data.description,
  };
}
"""

INDEX_MDX = """---
title: Introduction
description: Welcome to the documentation
---

## Welcome

This is your documentation site built with Fumadocs and Next.js 16.

### Features

- 📝 MDX support with React components
- 🎨 Beautiful UI with dark mode
- 🔍 Built-in search functionality
- ⚡ Fast and performant
- 📱 Fully responsive design

### Getting Started

Check out the [Quick Start](/docs/quick-start) guide to begin.

### Examples

```typescript
// Example TypeScript code
function hello(name: string): string {
  return `Hello, ${name}!`;
}
```
"""

QUICK_START_MDX = """---
title: Quick Start
description: Get started with your application
---

## Installation

Install the dependencies:

```bash
npm install
```

## Development

Run the development server:

```bash
npm run dev
```

Open [http://localhost:3000](http://localhost:3000) to see your app.

## Building for Production

Build your application:

```bash
npm run build
```

Start the production server:

```bash
npm start
```
"""

API_MDX = """---
title: API Reference
description: Complete API documentation
---

## API Overview

This page contains the complete API reference for your application.

### Core Methods

#### `hello(name: string)`

Returns a greeting message.

**Parameters:**
- `name` (string): The name to greet

**Returns:**
- string: A greeting message

**Example:**

```typescript
const message = hello("World");
console.log(message); // "Hello, World!"
```
"""

DOCS_PAGES = {
    "index": INDEX_MDX,
    "quick-start": QUICK_START_MDX,
    "api": API_MDX,
}

DOCS_META = json.dumps({"title": "Documentation", "pages": list(DOCS_PAGES)}, indent=2) + "\n"
